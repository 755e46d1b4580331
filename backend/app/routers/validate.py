"""
Query validation endpoint.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.routers.convert import parse_platform
from app.schemas import ErrorDetail, ValidateRequest, ValidateResponse
from core.query_builder.models import ErrorCode
from core.query_builder.validators import validate_query

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Validation"])


@router.post("/validate", response_model=ValidateResponse, response_model_exclude_none=True)
async def validate(body: ValidateRequest):
    """
    Check a query's structural well-formedness for a platform.
    """
    platform = parse_platform(body.platform)

    try:
        error = validate_query(body.query, platform)
    except Exception as e:
        logger.error(f"Validation failed unexpectedly: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "valid": False,
                "error": {
                    "message": "Failed to validate query",
                    "code": ErrorCode.VALIDATION_ERROR.value,
                },
            }
        )

    if error:
        return ValidateResponse(valid=False, error=ErrorDetail(**error.to_dict()))
    return ValidateResponse(valid=True)
