"""
Query history endpoints.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas import ClearHistoryResponse, HistoryItem, HistoryResponse
from core.database.crud import clear_query_history, get_query_history
from core.database.session import get_db

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/history", tags=["History"])


@router.get("", response_model=HistoryResponse)
async def list_history(
    request: Request,
    limit: Optional[int] = Query(None, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    """
    List recent conversions, newest first.
    """
    if limit is None:
        limit = request.app.state.settings.history_default_limit

    try:
        items = await get_query_history(db, limit=limit)
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch history: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch history"})

    return HistoryResponse(history=[HistoryItem.model_validate(item) for item in items])


@router.delete("", response_model=ClearHistoryResponse)
async def clear_history(db: AsyncSession = Depends(get_db)):
    """
    Delete all stored conversions.
    """
    cleared = await clear_query_history(db)
    logger.info(f"Cleared {cleared} history items")
    return ClearHistoryResponse(cleared=cleared)
