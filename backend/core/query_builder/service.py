"""
Conversion orchestrator: input checks, query generation and validation.
"""

import logging
import time
from typing import Callable, Optional

from .engines import QueryEngine
from .models import ConversionError, ConversionOutcome, ErrorCode, Platform, QueryResult
from .validators import validate_query

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter a description of the error"
DEFAULT_FAILURE_MESSAGE = "Failed to convert query"


def now_millis() -> int:
    return int(time.time() * 1000)


class QueryConversionService:
    """
    Converts natural-language error descriptions into platform queries.

    The engine is any QueryEngine (LLM-backed or pattern-based). Every
    produced query is run through the validator before it is returned.
    """

    def __init__(self, engine: QueryEngine, clock: Optional[Callable[[], int]] = None):
        self.engine = engine
        self.clock = clock or now_millis

    def convert(self, text: Optional[str], platform: Platform) -> ConversionOutcome:
        """
        Convert `text` into a query for `platform`.

        Returns:
            ConversionOutcome; see its docstring for how result/error combine
        """
        if not text or not text.strip():
            return ConversionOutcome(
                error=ConversionError(EMPTY_INPUT_MESSAGE, ErrorCode.EMPTY_INPUT, platform)
            )

        engine_name = getattr(self.engine, "name", type(self.engine).__name__)
        logger.info(f"Converting input for {platform.value} with {engine_name} engine")

        try:
            query = self.engine.generate_query(text.strip(), platform)
        except Exception as e:
            logger.error(f"Query generation failed for {platform.value}: {e}", exc_info=True)
            message = str(e) or DEFAULT_FAILURE_MESSAGE
            return ConversionOutcome(
                error=ConversionError(message, ErrorCode.CONVERSION_ERROR, platform)
            )

        if not query or not query.strip():
            return ConversionOutcome(
                error=ConversionError("Failed to generate query", ErrorCode.CONVERSION_ERROR, platform)
            )

        result = QueryResult(
            platform=platform,
            query=query,
            original_input=text,
            timestamp=self.clock(),
        )

        validation_error = validate_query(result.query, platform)
        if validation_error:
            logger.warning(
                f"Generated {platform.value} query failed validation: {validation_error.code.value}"
            )

        logger.info(f"Converted input to {platform.value} query with {engine_name} engine")
        return ConversionOutcome(result=result, error=validation_error)
