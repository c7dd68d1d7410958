"""Canonical error envelope for preset server responses.

Standardized structure:
{
  "error": "human readable message",
  "details": [...]   # optional, validation failures only
}
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class ErrorEnvelope(BaseModel):
    """Top-level error body returned by every endpoint."""
    error: str
    details: Optional[Any] = None

    def to_content(self) -> dict:
        return self.model_dump(exclude_none=True)


def build_error_envelope(message: str, details: Optional[Any] = None) -> ErrorEnvelope:
    """Construct an ErrorEnvelope (without raising)."""
    return ErrorEnvelope(error=message, details=details)


def error_response(
    message: str,
    status_code: int = 400,
    details: Optional[Any] = None,
) -> HTTPException:
    """Construct and raise a standardized error response.

    Args:
        message: Human-readable error message
        status_code: HTTP status code (default 400)
        details: Additional context

    Returns:
        HTTPException with canonical error envelope body
    """
    envelope = build_error_envelope(message, details)
    raise HTTPException(status_code=status_code, detail=envelope.to_content())


# --- Handlers ---

async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    if isinstance(detail, dict) and "error" in detail:
        return JSONResponse(content=detail, status_code=exc.status_code, headers=exc.headers)

    envelope = build_error_envelope(str(detail) if detail else "HTTP exception")
    return JSONResponse(content=envelope.to_content(), status_code=exc.status_code, headers=exc.headers)


async def _validation_exception_handler(request: Request, exc: RequestValidationError):
    envelope = build_error_envelope(
        "Validation failed",
        details=jsonable_encoder(exc.errors()),
    )
    return JSONResponse(content=envelope.to_content(), status_code=400)


async def _generic_exception_handler(request: Request, exc: Exception):
    # Full detail stays in the server log; clients only see the generic message.
    logger.exception(f"Unhandled error serving {request.method} {request.url.path}: {exc}")
    envelope = build_error_envelope(INTERNAL_ERROR_MESSAGE)
    return JSONResponse(content=envelope.to_content(), status_code=500)


def register_error_handlers(target_app: FastAPI) -> None:
    target_app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    target_app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    target_app.add_exception_handler(Exception, _generic_exception_handler)
