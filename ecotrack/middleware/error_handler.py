"""
Error Handler Middleware

Every failure leaves the service as ``{"error": "<message>"}``:
- EcoTrackError subclasses carry their own status code
- request validation failures become 400 with the first message
- Starlette HTTP errors (unknown route, wrong method) keep their status
- rate limit violations become 429
- anything else is logged with its traceback and returned as a 500
"""

import logging
from typing import Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from ecotrack.core.exceptions import EcoTrackError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


async def handle_app_error(request: Request, exc: EcoTrackError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(
            f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}"
        )
    return error_response(exc.status_code, exc.message)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _first_validation_message(exc)
    logger.info(f"Validation error on {request.method} {request.url.path}: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def handle_rate_limit(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded on {request.url.path}: {exc.detail}")
    return error_response(
        status.HTTP_429_TOO_MANY_REQUESTS, "Too many requests, please try again later"
    )


async def error_handler_middleware(request: Request, call_next: Callable) -> Response:
    """Catches anything the exception handlers did not and returns a generic 500."""
    try:
        return await call_next(request)
    except Exception as e:
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: "
            f"{type(e).__name__}: {e}",
            exc_info=True,
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
        )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EcoTrackError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RateLimitExceeded, handle_rate_limit)
