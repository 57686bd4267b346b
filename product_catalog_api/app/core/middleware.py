"""
Request middleware chain.

Every request passes through three stages, outermost first::

    log_requests -> require_api_key -> contain_errors -> route handler

The order is load‑bearing.  Requests are logged before authentication
so rejected calls still leave a trace.  Authentication runs before any
route handler, so no handler sees an unauthenticated request for a
protected path.  Error containment sits directly around the routes and
turns any uncaught exception into a generic 500 without leaking the
original message.

Starlette wraps each newly added middleware around the existing stack,
so ``install_middleware`` registers the stages innermost first.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, status
from starlette.responses import Response

from .errors import INTERNAL_ERROR_MESSAGE, error_response
from .logging_config import ACCESS_LOGGER_NAME
from .security import (
    INVALID_KEY_MESSAGE,
    NO_KEY_MESSAGE,
    api_key_matches,
    extract_api_key,
    is_public_path,
)

CallNext = Callable[[Request], Awaitable[Response]]

access_logger = logging.getLogger(ACCESS_LOGGER_NAME)
logger = logging.getLogger(__name__)


def _request_target(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


async def log_requests(request: Request, call_next: CallNext) -> Response:
    """Log method and path of every incoming request, then pass it on."""
    target = _request_target(request)
    access_logger.info(
        "[%s] %s %s",
        datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
        request.method,
        target,
    )
    started = time.perf_counter()
    response = await call_next(request)
    access_logger.debug(
        "%s %s -> %s (%.1f ms)",
        request.method,
        target,
        response.status_code,
        (time.perf_counter() - started) * 1000,
    )
    return response


def _unauthorized(message: str) -> Response:
    return error_response(
        message,
        status.HTTP_401_UNAUTHORIZED,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def require_api_key(request: Request, call_next: CallNext) -> Response:
    """Reject requests for protected paths that lack the configured API key."""
    settings = request.app.state.settings
    if is_public_path(request.url.path, settings.public_paths):
        return await call_next(request)

    authorization = request.headers.get("Authorization")
    if not authorization:
        return _unauthorized(NO_KEY_MESSAGE)
    if not api_key_matches(extract_api_key(authorization), settings.api_key):
        logger.warning("Rejected invalid API key for %s %s", request.method, request.url.path)
        return _unauthorized(INVALID_KEY_MESSAGE)
    return await call_next(request)


async def contain_errors(request: Request, call_next: CallNext) -> Response:
    """Convert uncaught exceptions from route handlers into a bare 500."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error while processing %s %s", request.method, request.url.path)
        return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


def install_middleware(app: FastAPI) -> None:
    """Register the middleware chain on ``app`` in the required order."""
    app.middleware("http")(contain_errors)
    app.middleware("http")(require_api_key)
    app.middleware("http")(log_requests)
