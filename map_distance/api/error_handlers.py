"""FastAPI exception handlers.

Domain errors become plain-text responses carrying the error message:
400 for validation and query failures, 401 for permission failures.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from ..domain.errors import AuthorizationError, MapDistanceError

logger = logging.getLogger(__name__)


async def authorization_exception_handler(
    request: Request, exc: AuthorizationError
) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=status.HTTP_401_UNAUTHORIZED)


async def domain_exception_handler(
    request: Request, exc: MapDistanceError
) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request."
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


async def internal_exception_handler(
    request: Request, exc: Exception
) -> PlainTextResponse:
    logger.exception("Unhandled exception: %s", exc)
    return PlainTextResponse(
        "Internal server error.",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach shared exception handlers to the FastAPI application."""
    app.add_exception_handler(AuthorizationError, authorization_exception_handler)
    app.add_exception_handler(MapDistanceError, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, internal_exception_handler)
