"""
SQLAlchemy models for the query history store.
"""

from sqlalchemy import BigInteger, Column, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class QueryHistory(Base):
    """One successful conversion; rows are append-only"""
    __tablename__ = "query_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    input = Column(Text, nullable=False)
    platform = Column(String(32), nullable=False)
    query = Column(Text, nullable=False)
    timestamp = Column(BigInteger, nullable=False, index=True)  # epoch millis

    def __repr__(self):
        return f"<QueryHistory(id={self.id}, platform={self.platform}, timestamp={self.timestamp})>"
