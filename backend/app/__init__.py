"""
FastAPI REST API for the Error Query Builder

Usage:
    # Start server
    uvicorn app.main:app --reload

    # Use client
    from app.client import QueryBuilderClient
    client = QueryBuilderClient()
    result = client.convert("database timeouts", "splunk")
"""

from app.client import QueryBuilderClient

__all__ = ['QueryBuilderClient']
__version__ = '2.0.0'
