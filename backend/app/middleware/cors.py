"""
CORS configuration.
"""

from typing import Any, Dict, List, Optional

ALLOWED_METHODS = ["GET", "POST", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Authorization"]


def get_cors_config(origins: Optional[List[str]] = None) -> Dict[str, Any]:
    """
    CORS settings for CORSMiddleware.

    Any origin is allowed unless an explicit origin list is configured
    (CORS_ORIGINS).
    """
    return {
        "allow_origins": origins or ["*"],
        "allow_credentials": False,
        "allow_methods": ALLOWED_METHODS,
        "allow_headers": ALLOWED_HEADERS,
        "max_age": 3600,
    }


def get_cors_headers(origins: Optional[List[str]] = None, origin: Optional[str] = None) -> Dict[str, str]:
    """CORS headers for responses built outside the middleware (error handlers)."""
    allowed = origins or ["*"]
    if "*" in allowed:
        allow_origin = "*"
    elif origin and origin in allowed:
        allow_origin = origin
    else:
        allow_origin = allowed[0]

    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
        "Access-Control-Allow-Headers": ", ".join(ALLOWED_HEADERS),
    }
