"""
Error responses.

Domain exceptions derive from StreampassError and are rendered here with a
status chosen by exception class. Routes therefore raise domain errors and
never build HTTPExceptions for them.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from modules.payments.exceptions import GatewayNotConfiguredError, GatewayRejectedError
from shared.exceptions import (
    StreampassError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
)

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


# First match wins, so subclasses come before their bases
ERROR_STATUS_CODES: list[tuple[type[StreampassError], int]] = [
    (GatewayNotConfiguredError, 500),
    (GatewayRejectedError, 400),
    (NotFoundError, 404),
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (ConflictError, 409),
    (ExternalServiceError, 502),
]


def status_code_for(exc: StreampassError) -> int:
    for error_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 500


async def streampass_error_handler(request: Request, exc: StreampassError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {status_code} {exc.code}")

    headers: Optional[dict[str, str]] = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StreampassError, streampass_error_handler)
