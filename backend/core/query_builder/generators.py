"""
Deterministic query generators, one per platform.

Each generator maps a FeatureSet onto its platform's dialect. A single
"primary" severity clause is chosen first (500 beats 404 beats generic
error), then the timeout/database/api/auth clauses are appended in that
order. Generators never return an empty string.
"""

import json
from typing import Dict, List

from .models import FeatureSet, Platform


def _es_clause(kind: str, field: str, value) -> str:
    return f'{{ "{kind}": {{ "{field}": {json.dumps(value)} }} }}'


# Clause vocabulary: key -> platform fragment
CLAUSES: Dict[Platform, Dict[str, str]] = {
    Platform.SENTRY: {
        "500": "http.status_code:500",
        "404": "http.status_code:404",
        "error": "level:error",
        "timeout": "message:*timeout*",
        "database": "transaction:*/db/*",
        "api": "transaction:*/api/*",
        "auth": "transaction:*/auth/*",
    },
    Platform.DATADOG: {
        "500": "status:500",
        "404": "status:404",
        "error": "status:error",
        "timeout": "@message:*timeout*",
        "database": "service:database",
        "api": "service:api",
        "auth": "service:auth",
    },
    Platform.ELASTICSEARCH: {
        "500": _es_clause("match", "http.response.status_code", 500),
        "404": _es_clause("match", "http.response.status_code", 404),
        "error": _es_clause("match", "log.level", "error"),
        "timeout": _es_clause("wildcard", "message", "*timeout*"),
        "database": _es_clause("match", "service.name", "database"),
        "api": _es_clause("match", "service.name", "api"),
        "auth": _es_clause("match", "service.name", "auth"),
    },
    Platform.SPLUNK: {
        "500": "status=500",
        "404": "status=404",
        "error": "level=error",
        "timeout": "message=*timeout*",
        "database": "source=*database*",
        "api": "source=*api*",
        "auth": "source=*auth*",
    },
}

SPLUNK_INDEX = "index=main"
SPLUNK_STATS = "| stats count by host, source"


def collect_clause_keys(features: FeatureSet) -> List[str]:
    """
    Ordered clause keys for a feature set.

    Only one primary clause is emitted; status codes take priority over
    the generic error level.
    """
    keys = []

    if features.has_500:
        keys.append("500")
    elif features.has_404:
        keys.append("404")
    elif features.has_error or features.has_exception:
        keys.append("error")

    if features.has_timeout:
        keys.append("timeout")
    if features.has_database:
        keys.append("database")
    if features.has_api:
        keys.append("api")
    if features.has_auth:
        keys.append("auth")

    return keys


def _clauses(features: FeatureSet, platform: Platform) -> List[str]:
    vocabulary = CLAUSES[platform]
    return [vocabulary[key] for key in collect_clause_keys(features)]


def generate_sentry_query(features: FeatureSet) -> str:
    conditions = _clauses(features, Platform.SENTRY)
    return " ".join(conditions) if conditions else CLAUSES[Platform.SENTRY]["error"]


def generate_datadog_query(features: FeatureSet) -> str:
    conditions = _clauses(features, Platform.DATADOG)
    return " ".join(conditions) if conditions else CLAUSES[Platform.DATADOG]["error"]


def generate_elasticsearch_query(features: FeatureSet) -> str:
    must_clauses = _clauses(features, Platform.ELASTICSEARCH)

    if not must_clauses:
        must_clauses = [CLAUSES[Platform.ELASTICSEARCH]["error"]]

    joined = ",\n        ".join(must_clauses)
    return (
        "{\n"
        '  "query": {\n'
        '    "bool": {\n'
        '      "must": [\n'
        f"        {joined}\n"
        "      ]\n"
        "    }\n"
        "  }\n"
        "}"
    )


def generate_splunk_query(features: FeatureSet) -> str:
    conditions = [SPLUNK_INDEX]
    conditions.extend(_clauses(features, Platform.SPLUNK))
    conditions.append(SPLUNK_STATS)
    return " ".join(conditions)


def generate_query_from_features(features: FeatureSet, platform: Platform) -> str:
    """Dispatch to the generator for `platform`."""
    if platform == Platform.SENTRY:
        return generate_sentry_query(features)
    elif platform == Platform.DATADOG:
        return generate_datadog_query(features)
    elif platform == Platform.ELASTICSEARCH:
        return generate_elasticsearch_query(features)
    elif platform == Platform.SPLUNK:
        return generate_splunk_query(features)
    raise ValueError(f"Unsupported platform: {platform}")
