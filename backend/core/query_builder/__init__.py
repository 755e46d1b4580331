"""
Natural-language to monitoring-query conversion.

Import engines and the conversion service from `engines` and `service`
directly (they import `core.prompts`, which imports this package).
"""

from .models import (
    Platform,
    ErrorCode,
    FeatureSet,
    QueryResult,
    ConversionError,
    ConversionOutcome,
)
from .patterns import extract_features
from .generators import (
    generate_query_from_features,
    generate_sentry_query,
    generate_datadog_query,
    generate_elasticsearch_query,
    generate_splunk_query,
)
from .validators import validate_query

__all__ = [
    "Platform",
    "ErrorCode",
    "FeatureSet",
    "QueryResult",
    "ConversionError",
    "ConversionOutcome",
    "extract_features",
    "generate_query_from_features",
    "generate_sentry_query",
    "generate_datadog_query",
    "generate_elasticsearch_query",
    "generate_splunk_query",
    "validate_query",
]
