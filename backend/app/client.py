"""
Python client for the Error Query Builder API

Usage:
    from app.client import QueryBuilderClient

    client = QueryBuilderClient("http://localhost:8000")

    result = client.convert("Show me all 500 errors from the API service", "sentry")
    print(result.query)

    error = client.validate(result.query, "sentry")
    if error:
        print(f"{error.code.value}: {error.message}")
"""

import logging
from typing import Dict, List, Optional

import requests

from core.query_builder.models import ConversionError, ErrorCode, Platform, QueryResult

logger = logging.getLogger(__name__)


class QueryBuilderAPIError(Exception):
    """Raised when the API rejects a conversion"""

    def __init__(self, message: str, status_code: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class QueryBuilderClient:
    """
    Python client for the Error Query Builder API.
    """

    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 30):
        """
        Initialize client.

        Args:
            base_url: API base URL
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def health_check(self) -> bool:
        """
        Check API health.

        Returns:
            True when the API answers /api/health with 2xx
        """
        try:
            response = self.session.get(f"{self.base_url}/api/health", timeout=self.timeout)
            return response.ok
        except requests.RequestException:
            return False

    def convert(self, text: str, platform: str) -> QueryResult:
        """
        Convert a natural-language error description.

        Args:
            text: Error description
            platform: Target platform name

        Returns:
            QueryResult built from the API response

        Raises:
            ValueError: empty description
            QueryBuilderAPIError: the API answered with an error
        """
        if not text or not text.strip():
            raise ValueError("Please enter a description of the error")

        response = self.session.post(
            f"{self.base_url}/api/convert",
            json={"naturalLanguage": text, "platform": platform},
            timeout=self.timeout
        )

        if not response.ok:
            data = self._json_or_empty(response)
            raise QueryBuilderAPIError(
                data.get("error") or f"API request failed: {response.status_code}",
                status_code=response.status_code,
                code=data.get("code")
            )

        data = response.json()
        return QueryResult(
            platform=Platform.parse(data["platform"]),
            query=data["query"],
            original_input=data["originalInput"],
            timestamp=data["timestamp"],
            reasoning=data.get("reasoning")
        )

    def validate(self, query: str, platform: str) -> Optional[ConversionError]:
        """
        Validate query syntax for a platform.

        Validation is advisory: when the API cannot be reached the query is
        let through (None).

        Returns:
            ConversionError when the query is rejected, otherwise None
        """
        parsed_platform = Platform.parse(platform)

        if not query or not query.strip():
            return ConversionError("Query cannot be empty", ErrorCode.EMPTY_QUERY, parsed_platform)

        try:
            response = self.session.post(
                f"{self.base_url}/api/validate",
                json={"query": query, "platform": parsed_platform.value},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.warning(f"Validation request failed: {e}")
            return None

        if not response.ok:
            return ConversionError("Failed to validate query", ErrorCode.VALIDATION_ERROR, parsed_platform)

        data = self._json_or_empty(response)
        error = data.get("error")
        if not data.get("valid") and error:
            try:
                code = ErrorCode(error.get("code"))
            except ValueError:
                code = ErrorCode.VALIDATION_ERROR
            return ConversionError(error.get("message", ""), code, parsed_platform)

        return None

    def get_history(self, limit: int = 10) -> List[Dict]:
        """
        Get recent conversions, newest first.

        Returns:
            List of history item dicts; empty on any failure
        """
        try:
            response = self.session.get(
                f"{self.base_url}/api/history",
                params={"limit": limit},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Error fetching history: {e}")
            return []

        if not response.ok:
            logger.error(f"Failed to fetch history: {response.status_code}")
            return []

        return self._json_or_empty(response).get("history", [])

    @staticmethod
    def _json_or_empty(response) -> Dict:
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
