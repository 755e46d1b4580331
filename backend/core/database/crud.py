"""
CRUD operations for the query history store.
"""

from typing import List

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import QueryHistory


async def create_history_item(
    db: AsyncSession,
    input_text: str,
    platform: str,
    query: str,
    timestamp: int
) -> QueryHistory:
    """Append a conversion to history"""
    item = QueryHistory(
        input=input_text,
        platform=platform,
        query=query,
        timestamp=timestamp
    )
    db.add(item)
    await db.commit()
    await db.refresh(item)
    return item


async def get_query_history(db: AsyncSession, limit: int = 10) -> List[QueryHistory]:
    """Most recent conversions, newest first"""
    query = (
        select(QueryHistory)
        .order_by(desc(QueryHistory.timestamp), desc(QueryHistory.id))
        .limit(limit)
    )
    result = await db.execute(query)
    return list(result.scalars().all())


async def clear_query_history(db: AsyncSession) -> int:
    """Delete every history row; returns the number removed"""
    result = await db.execute(delete(QueryHistory))
    await db.commit()
    return result.rowcount or 0
