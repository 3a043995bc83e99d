"""Error kinds raised by the request handlers.

Every ``ApiError`` renders as a plain-text body with its own status code.
Unmatched routes are not an ``ApiError``: they get the JSON body built by
``route_not_found_body``.
"""
from __future__ import annotations
from typing import Optional

class ApiError(Exception):
    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

class ValidationError(ApiError):
    status_code = 400

class NotFound(ApiError):
    status_code = 404

class UpstreamError(ApiError):
    """A third-party API answered with a non-success status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message, status_code)

class TransportError(ApiError):
    """The third-party API could not be reached or its body could not be parsed."""
    status_code = 500

def route_not_found_body() -> dict:
    return { 'error': 'Endpoint not found' }
