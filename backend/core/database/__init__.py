"""
Database package for the query history store.
Provides SQLAlchemy models, session management and CRUD helpers.
"""

from .models import Base, QueryHistory
from .session import build_engine, build_session_factory, get_db, init_db, drop_db
from .crud import (
    create_history_item,
    get_query_history,
    clear_query_history,
)

__all__ = [
    "Base",
    "QueryHistory",
    "build_engine",
    "build_session_factory",
    "get_db",
    "init_db",
    "drop_db",
    "create_history_item",
    "get_query_history",
    "clear_query_history",
]
