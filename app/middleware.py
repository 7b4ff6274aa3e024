"""
HTTP middleware and error handlers.

- Request logging: one line per request with status and timing.
- Error mapping: every error kind becomes a JSON body {"error": message}.
"""
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core import request_error_message
from .errors import ProductAPIError
from .logger import get_logger

logger = get_logger("http")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    # an exception escaping call_next becomes a 500 in the outer error handler
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method, request.url.path, status_code, elapsed_ms,
        )


async def product_error_handler(request: Request, exc: ProductAPIError):
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = request_error_message(exc.errors())
    logger.warning("%s %s failed: %s", request.method, request.url.path, message)
    return _error_response(400, message)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return _error_response(500, "Internal Server Error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProductAPIError, product_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
