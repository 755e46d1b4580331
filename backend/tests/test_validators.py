"""
Tests for advisory query validation.
"""

import pytest

from core.query_builder.generators import generate_query_from_features
from core.query_builder.models import ErrorCode, FeatureSet, Platform
from core.query_builder.validators import validate_query


@pytest.mark.parametrize("platform", list(Platform))
@pytest.mark.parametrize("query", ["", "   ", "\n\t", None])
def test_empty_query_rejected_for_every_platform(platform, query):
    error = validate_query(query, platform)

    assert error is not None
    assert error.code == ErrorCode.EMPTY_QUERY
    assert error.message == "Query cannot be empty"
    assert error.platform == platform


@pytest.mark.parametrize("query", ["{ invalid json", "level:error", '{"query": '])
def test_elasticsearch_requires_json(query):
    error = validate_query(query, Platform.ELASTICSEARCH)

    assert error.code == ErrorCode.INVALID_JSON
    assert error.message == "Invalid JSON syntax for Elasticsearch query"


def test_elasticsearch_accepts_any_json_value():
    assert validate_query('{"query": {"match_all": {}}}', Platform.ELASTICSEARCH) is None
    assert validate_query("[]", Platform.ELASTICSEARCH) is None


def test_splunk_requires_index():
    error = validate_query("level=error | stats count", Platform.SPLUNK)

    assert error.code == ErrorCode.MISSING_INDEX
    assert error.message == "Splunk queries should specify an index"


def test_splunk_index_check_is_a_substring_test():
    assert validate_query("search sourcetype=x myindex=foo", Platform.SPLUNK) is None
    assert validate_query("index=main level=error", Platform.SPLUNK) is None


@pytest.mark.parametrize("platform", [Platform.SENTRY, Platform.DATADOG])
def test_key_value_platforms_accept_any_text(platform):
    assert validate_query("anything at all", platform) is None


@pytest.mark.parametrize("platform", list(Platform))
@pytest.mark.parametrize(
    "features",
    [FeatureSet(), FeatureSet(has_500=True, has_api=True), FeatureSet(has_timeout=True, has_database=True)],
)
def test_generated_queries_always_validate(platform, features):
    assert validate_query(generate_query_from_features(features, platform), platform) is None


def test_deeply_nested_elasticsearch_query_is_invalid_json():
    error = validate_query("[" * 100000, Platform.ELASTICSEARCH)

    assert error is not None
    assert error.code == ErrorCode.INVALID_JSON
    assert error.message == "Invalid JSON syntax for Elasticsearch query"


def test_error_wire_shape_has_message_and_code_only():
    error = validate_query("level=error", Platform.SPLUNK)

    assert error.to_dict() == {"message": "Splunk queries should specify an index", "code": "MISSING_INDEX"}
