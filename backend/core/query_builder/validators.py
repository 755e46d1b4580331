"""
Structural checks for generated queries.

Validation is heuristic and advisory: it never parses a query into an
AST and never raises. A None return means the query passed.
"""

import json
from typing import Optional

from .models import ConversionError, ErrorCode, Platform

EMPTY_QUERY_MESSAGE = "Query cannot be empty"
INVALID_JSON_MESSAGE = "Invalid JSON syntax for Elasticsearch query"
MISSING_INDEX_MESSAGE = "Splunk queries should specify an index"


def validate_query(query: Optional[str], platform: Platform) -> Optional[ConversionError]:
    """
    Check minimal well-formedness of `query` for `platform`.

    Args:
        query: Query text as produced by a generator or an LLM
        platform: Target platform

    Returns:
        ConversionError describing the first failed check, or None
    """
    if not query or not query.strip():
        return ConversionError(EMPTY_QUERY_MESSAGE, ErrorCode.EMPTY_QUERY, platform)

    if platform == Platform.ELASTICSEARCH:
        try:
            json.loads(query)
        except (ValueError, RecursionError):
            return ConversionError(INVALID_JSON_MESSAGE, ErrorCode.INVALID_JSON, platform)

    elif platform == Platform.SPLUNK:
        if "index=" not in query:
            return ConversionError(MISSING_INDEX_MESSAGE, ErrorCode.MISSING_INDEX, platform)

    # Sentry and Datadog accept any non-empty text
    return None
