"""
Supported platform catalogue.
"""

from fastapi import APIRouter

from app.schemas import PlatformInfo, PlatformListResponse
from core.query_builder.models import Platform

router = APIRouter(prefix="/api", tags=["General"])

PLATFORM_CATALOGUE = {
    Platform.SENTRY: {
        "name": "Sentry",
        "description": "Error tracking and performance monitoring",
        "exampleQuery": "level:error http.status_code:500",
    },
    Platform.DATADOG: {
        "name": "Datadog",
        "description": "Infrastructure and application monitoring",
        "exampleQuery": "status:error service:api",
    },
    Platform.ELASTICSEARCH: {
        "name": "Elasticsearch",
        "description": "Distributed search and analytics",
        "exampleQuery": '{"query": {"match": {"log.level": "error"}}}',
    },
    Platform.SPLUNK: {
        "name": "Splunk",
        "description": "Log analysis and SIEM platform",
        "exampleQuery": "index=main level=error | stats count by host",
    },
}


@router.get("/platforms", response_model=PlatformListResponse)
async def list_platforms():
    """List supported platforms with an example query for each."""
    return PlatformListResponse(
        platforms=[
            PlatformInfo(id=platform.value, **PLATFORM_CATALOGUE[platform])
            for platform in Platform
        ]
    )
