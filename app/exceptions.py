# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response is plain text; only successful conversions and the
# health check return JSON.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.static import static_fallback
from core.errors import ConversionError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not found"


class RomanNumeralAPIException(Exception):
    """
    Base exception for request-level failures.

    Raised by routers for problems with the request itself, before the
    converter is called.
    """

    def __init__(
        self,
        message: str,
        code: str = "API_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}


# =============================================================================
# Query Exceptions
# =============================================================================

class MissingQueryError(RomanNumeralAPIException):
    """Raised when the query parameter is absent or blank."""

    def __init__(self, parameter: str = "query"):
        super().__init__(
            message="Missing query parameter",
            code="MISSING_QUERY",
            status_code=400,
            details={"parameter": parameter},
        )


class InvalidNumberFormatError(RomanNumeralAPIException):
    """Raised when the query parameter is not a decimal number."""

    def __init__(self, raw_value: str):
        super().__init__(
            message="Invalid number format",
            code="INVALID_NUMBER_FORMAT",
            status_code=400,
            details={"value": raw_value},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def api_exception_handler(
    request: Request,
    exc: RomanNumeralAPIException
) -> PlainTextResponse:
    """Convert RomanNumeralAPIException to a plain-text response."""
    logger.warning(f"{exc.code} on {request.url.path}: {exc.details}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def conversion_exception_handler(
    request: Request,
    exc: ConversionError
) -> PlainTextResponse:
    """
    Convert a converter error to a 400 response.

    Each error class has its own message, so clients can tell a fractional
    value from an out-of-range one.
    """
    logger.warning(f"{exc.code} on {request.url.path}: {exc.details}")
    return PlainTextResponse(exc.message, status_code=400)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> Response:
    """
    Render Starlette HTTP errors as plain text.

    - 405 (wrong method on a known path) is reported as 404
    - Unmatched GET paths fall back to the static front-end when configured
    """
    if exc.status_code in (404, 405):
        if exc.status_code == 404 and request.method in ("GET", "HEAD"):
            fallback = static_fallback(request.url.path)
            if fallback is not None:
                return fallback
        return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)

    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> PlainTextResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return PlainTextResponse("Internal server error", status_code=500)
