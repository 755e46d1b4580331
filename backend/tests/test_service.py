"""
Tests for the conversion orchestrator.
"""

import json
import logging
from unittest.mock import MagicMock

import pytest

from conftest import FIXED_TIMESTAMP
from core.query_builder.models import ErrorCode, Platform
from core.query_builder.service import QueryConversionService


def _service_returning(query):
    engine = MagicMock()
    engine.name = "fake"
    engine.generate_query.return_value = query
    return QueryConversionService(engine, clock=lambda: FIXED_TIMESTAMP), engine


class TestInputChecks:

    @pytest.mark.parametrize("text", ["", "   ", "\n", None])
    def test_empty_input_never_reaches_engine(self, text):
        service, engine = _service_returning("level:error")

        outcome = service.convert(text, Platform.SENTRY)

        assert outcome.result is None
        assert outcome.error.code == ErrorCode.EMPTY_INPUT
        assert outcome.error.message == "Please enter a description of the error"
        engine.generate_query.assert_not_called()

    def test_engine_receives_trimmed_text(self):
        service, engine = _service_returning("level:error")

        outcome = service.convert("  login failures \n", Platform.SENTRY)

        engine.generate_query.assert_called_once_with("login failures", Platform.SENTRY)
        assert outcome.result.original_input == "  login failures \n"


class TestEngineFailures:

    def test_engine_exception_becomes_conversion_error(self):
        service, engine = _service_returning(None)
        engine.generate_query.side_effect = RuntimeError("OpenAI API error: 401")

        outcome = service.convert("errors", Platform.SENTRY)

        assert not outcome.ok
        assert outcome.result is None
        assert outcome.error.code == ErrorCode.CONVERSION_ERROR
        assert "401" in outcome.error.message

    def test_exception_without_message_uses_default(self):
        service, engine = _service_returning(None)
        engine.generate_query.side_effect = RuntimeError()

        outcome = service.convert("errors", Platform.SENTRY)

        assert outcome.error.message == "Failed to convert query"

    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_blank_query_is_a_conversion_error(self, query):
        service, _ = _service_returning(query)

        outcome = service.convert("errors", Platform.DATADOG)

        assert outcome.result is None
        assert outcome.error.code == ErrorCode.CONVERSION_ERROR
        assert outcome.error.message == "Failed to generate query"


class TestValidation:

    def test_valid_query_has_no_error(self):
        service, _ = _service_returning("level:error")

        outcome = service.convert("errors", Platform.SENTRY)

        assert outcome.ok
        assert outcome.error is None
        assert outcome.result.timestamp == FIXED_TIMESTAMP

    def test_invalid_elasticsearch_query_is_returned_with_error(self):
        service, _ = _service_returning("{ invalid json")

        outcome = service.convert("errors", Platform.ELASTICSEARCH)

        assert outcome.result.query == "{ invalid json"
        assert outcome.error.code == ErrorCode.INVALID_JSON

    def test_splunk_query_without_index_is_flagged(self):
        service, _ = _service_returning("level=error")

        outcome = service.convert("errors", Platform.SPLUNK)

        assert outcome.result is not None
        assert outcome.error.code == ErrorCode.MISSING_INDEX


class TestPatternConversions:
    """End-to-end conversions with the offline engine"""

    def test_sentry_500_from_api(self, pattern_service):
        outcome = pattern_service.convert("Show me all 500 errors from the API service", Platform.SENTRY)

        result = outcome.result
        assert result.platform == Platform.SENTRY
        assert result.query == "http.status_code:500 transaction:*/api/*"
        assert result.original_input == "Show me all 500 errors from the API service"
        assert result.timestamp == FIXED_TIMESTAMP
        assert outcome.error is None

    def test_splunk_database_timeouts(self, pattern_service):
        query = pattern_service.convert("database timeouts", Platform.SPLUNK).result.query

        assert query.startswith("index=main")
        assert "source=*database*" in query
        assert "message=*timeout*" in query
        assert query.endswith("| stats count by host, source")

    def test_datadog_timeout_errors(self, pattern_service):
        query = pattern_service.convert("Find timeout errors", Platform.DATADOG).result.query

        assert query == "status:error @message:*timeout*"

    def test_elasticsearch_is_valid_json(self, pattern_service):
        outcome = pattern_service.convert("Show database errors", Platform.ELASTICSEARCH)

        assert outcome.error is None
        must = json.loads(outcome.result.query)["query"]["bool"]["must"]
        assert {"match": {"log.level": "error"}} in must
        assert {"match": {"service.name": "database"}} in must

    def test_to_dict_uses_wire_names(self, pattern_service):
        data = pattern_service.convert("errors", Platform.SENTRY).result.to_dict()

        assert data == {
            "platform": "sentry",
            "query": "level:error",
            "originalInput": "errors",
            "timestamp": FIXED_TIMESTAMP,
        }


class TestDeeplyNestedOutput:

    def test_nested_elasticsearch_reply_is_a_validation_error(self):
        service, _ = _service_returning("[" * 100000)

        outcome = service.convert("errors", Platform.ELASTICSEARCH)

        assert outcome.result is not None
        assert outcome.error.code == ErrorCode.INVALID_JSON


class TestLogging:

    def test_start_and_finish_logged(self, pattern_service, caplog):
        with caplog.at_level(logging.INFO, logger="core.query_builder.service"):
            pattern_service.convert("database timeouts", Platform.SPLUNK)

        messages = [record.getMessage() for record in caplog.records]
        assert "Converting input for splunk with pattern engine" in messages
        assert "Converted input to splunk query with pattern engine" in messages
