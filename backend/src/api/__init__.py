"""API層モジュール."""
from .dependencies import Dependencies
from .handlers import verify_age
from .request import get_header, get_json_body, get_viewer_country
from .response import (
    default_headers,
    error_response,
    json_response,
    success_response,
)

__all__ = [
    # Dependencies
    "Dependencies",
    # Request utilities
    "get_header",
    "get_json_body",
    "get_viewer_country",
    # Response utilities
    "default_headers",
    "json_response",
    "success_response",
    "error_response",
    # Handlers
    "verify_age",
]
