"""
Shared fixtures for the Error Query Builder test suite.

Run with: pytest backend/tests -v
"""

import sys
from pathlib import Path

import pytest

# Add backend directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import Settings
from core.query_builder.engines import PatternQueryEngine
from core.query_builder.service import QueryConversionService

FIXED_TIMESTAMP = 1700000000000


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite database"""
    return Settings(
        llm_provider="pattern",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'query_history.db'}",
        environment="test",
        enable_metrics=False,
    )


@pytest.fixture
def pattern_service():
    """Conversion service using the offline pattern engine and a fixed clock"""
    return QueryConversionService(PatternQueryEngine(), clock=lambda: FIXED_TIMESTAMP)
