"""
Data models for natural-language to monitoring-query conversion.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Platform(str, Enum):
    """Supported monitoring/query backends"""
    SENTRY = "sentry"
    DATADOG = "datadog"
    ELASTICSEARCH = "elasticsearch"
    SPLUNK = "splunk"

    @classmethod
    def parse(cls, value: Any) -> "Platform":
        """
        Resolve a platform from its wire name.

        Raises:
            ValueError: if the name is not a supported platform
        """
        if isinstance(value, cls):
            return value
        name = str(value or "").strip().lower()
        for platform in cls:
            if platform.value == name:
                return platform
        raise ValueError(f"Unsupported platform: {value}")


class ErrorCode(str, Enum):
    """Codes carried by ConversionError values"""
    EMPTY_INPUT = "EMPTY_INPUT"
    EMPTY_QUERY = "EMPTY_QUERY"
    INVALID_JSON = "INVALID_JSON"
    MISSING_INDEX = "MISSING_INDEX"
    CONVERSION_ERROR = "CONVERSION_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"


@dataclass(frozen=True)
class FeatureSet:
    """Keyword classification of a natural-language error description"""
    has_error: bool = False
    has_exception: bool = False
    has_500: bool = False
    has_404: bool = False
    has_timeout: bool = False
    has_database: bool = False
    has_api: bool = False
    has_auth: bool = False

    def any_set(self) -> bool:
        return any((
            self.has_error,
            self.has_exception,
            self.has_500,
            self.has_404,
            self.has_timeout,
            self.has_database,
            self.has_api,
            self.has_auth,
        ))


@dataclass(frozen=True)
class QueryResult:
    """A generated platform query stamped with its input"""
    platform: Platform
    query: str
    original_input: str
    timestamp: int  # epoch millis
    reasoning: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "platform": self.platform.value,
            "query": self.query,
            "originalInput": self.original_input,
            "timestamp": self.timestamp,
        }
        if self.reasoning:
            data["reasoning"] = self.reasoning
        return data


@dataclass(frozen=True)
class ConversionError:
    """Tagged failure value; callers branch on `code`"""
    message: str
    code: ErrorCode
    platform: Optional[Platform] = None

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape `{message, code}`; the platform is carried by the enclosing response"""
        return {"message": self.message, "code": self.code.value}


@dataclass(frozen=True)
class ConversionOutcome:
    """
    Result of a conversion attempt.

    `result` is None when the conversion itself failed. When both `result`
    and `error` are set, a query was produced but failed validation; the
    query is kept so the caller can still decide to use it.
    """
    result: Optional[QueryResult] = None
    error: Optional[ConversionError] = None

    @property
    def ok(self) -> bool:
        return self.result is not None and self.error is None
