"""
Tests for keyword extraction.
"""

import pytest

from core.query_builder.models import FeatureSet
from core.query_builder.patterns import extract_features


def test_no_keywords_yields_empty_feature_set():
    features = extract_features("something went wrong")

    assert features == FeatureSet()
    assert not features.any_set()


def test_matching_is_case_insensitive():
    features = extract_features("API TIMEOUT Exception")

    assert features.has_api
    assert features.has_timeout
    assert features.has_exception
    assert not features.has_error


def test_flags_are_independent():
    features = extract_features("500 errors and timeouts from the database API after login")

    assert features.has_500
    assert features.has_error
    assert features.has_timeout
    assert features.has_database
    assert features.has_api
    assert features.has_auth
    assert not features.has_404


@pytest.mark.parametrize("text", ["database errors", "db is down", "slow DB"])
def test_database_keywords(text):
    assert extract_features(text).has_database


@pytest.mark.parametrize("text", ["auth service", "login failures", "OAuth tokens"])
def test_auth_keywords(text):
    assert extract_features(text).has_auth


def test_status_codes_are_substring_matches():
    features = extract_features("HTTP 404 and 5000ms latency")

    assert features.has_404
    assert features.has_500


def test_extraction_is_deterministic():
    text = "Show me all 500 errors from the API service"

    assert extract_features(text) == extract_features(text)
