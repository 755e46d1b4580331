"""
Keyword extraction for the offline query generator.
"""

from .models import FeatureSet


def extract_features(text: str) -> FeatureSet:
    """
    Classify an error description by case-insensitive substring matches.

    Flags are independent; several may be set at once.
    """
    lowered = text.lower()

    return FeatureSet(
        has_error="error" in lowered,
        has_exception="exception" in lowered,
        has_500="500" in lowered,
        has_404="404" in lowered,
        has_timeout="timeout" in lowered,
        has_database="database" in lowered or "db" in lowered,
        has_api="api" in lowered,
        has_auth="auth" in lowered or "login" in lowered,
    )
