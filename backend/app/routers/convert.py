"""
Query conversion endpoint.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas import ConvertRequest, ConvertResponse, ErrorDetail
from core.database.crud import create_history_item
from core.database.session import get_db
from core.query_builder.models import ErrorCode, Platform, QueryResult
from core.query_builder.service import QueryConversionService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Conversion"])

INVALID_PLATFORM_MESSAGE = "Invalid platform specified"


def get_conversion_service(request: Request) -> QueryConversionService:
    return request.app.state.conversion_service


def parse_platform(value: str) -> Platform:
    """Resolve a platform name or fail the request with 400."""
    try:
        return Platform.parse(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=INVALID_PLATFORM_MESSAGE)


async def save_history(db: AsyncSession, result: QueryResult) -> None:
    """Best-effort history append; failures are logged, never raised."""
    try:
        await create_history_item(
            db=db,
            input_text=result.original_input,
            platform=result.platform.value,
            query=result.query,
            timestamp=result.timestamp
        )
    except Exception as e:
        logger.error(f"Failed to save history: {e}", exc_info=True)
        await db.rollback()


@router.post("/convert", response_model=ConvertResponse, response_model_exclude_none=True)
async def convert_query(
    body: ConvertRequest,
    db: AsyncSession = Depends(get_db),
    service: QueryConversionService = Depends(get_conversion_service)
):
    """
    Convert a natural-language error description into a platform query.

    The query is validated before it is returned; a validation failure is
    reported in `validationError` alongside the query.
    """
    platform = parse_platform(body.platform)

    outcome = await run_in_threadpool(service.convert, body.text, platform)

    if outcome.result is None:
        error = outcome.error
        status_code = 400 if error.code == ErrorCode.EMPTY_INPUT else 500
        return JSONResponse(
            status_code=status_code,
            content={"error": error.message, "code": error.code.value}
        )

    result = outcome.result
    await save_history(db, result)

    response = ConvertResponse(**result.to_dict())
    if outcome.error:
        response.validationError = ErrorDetail(**outcome.error.to_dict())

    return response
