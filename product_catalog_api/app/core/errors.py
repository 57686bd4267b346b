"""
Exception handlers that give every error response the same shape.

FastAPI renders errors as ``{"detail": ...}`` and request validation
failures as 422.  Clients of this API expect ``{"error": <message>}``
and a 400 for any malformed request, so both handlers are replaced
here.  Uncaught exceptions are not handled here; the middleware chain
turns them into a generic 500.
"""

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def error_response(message: Any, status_code: int, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


def describe_validation_error(exc: RequestValidationError) -> str:
    """Build a short client-facing message from the first validation error."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = tuple(first.get("loc", ()))
    if loc and loc[0] == "body":
        return "Missing or invalid fields"
    if len(loc) >= 2 and loc[0] == "query":
        return f"Invalid query parameter '{loc[1]}': {first.get('msg', 'invalid value')}"
    return "Invalid request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.detail, exc.status_code, getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(describe_validation_error(exc), status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the ``{"error": ...}`` handlers on ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
