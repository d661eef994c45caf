"""Error Handlers — global exception handlers for the Hello API.

Invariants:
    - HelloApiError → its own status with {"error": message}
    - RequestValidationError (body failed to decode/type-check) → 400 "Invalid JSON format"
    - Routing HTTPException (404, 405) → {"error": detail}, headers (Allow) kept
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Every error body has the same flat shape, whichever layer raised it
    - Validation errors reuse InvalidJSONError so code and message stay in one place
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from hello_api.core.errors import HelloApiError, ErrorContext, InvalidJSONError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_hello_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_hello_api_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(HelloApiError)
    async def hello_api_error_handler(request: Request, exc: HelloApiError):
        exc.context.path = request.url.path
        exc.context.method = request.method
        logger.warning(
            f"HelloApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": exc.context.path,
                "method": exc.context.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Undecodable or mistyped bodies are all reported as invalid JSON."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        err = InvalidJSONError(
            ErrorContext(path=request.url.path, method=request.method),
        )
        return JSONResponse(
            status_code=err.http_status, content=err.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for errors raised by routing (404, 405)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        logger.info(
            f"{exc.status_code} on {request.method} {request.url.path}",
            extra={"status_code": exc.status_code},
        )
        headers = dict(exc.headers or {})
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            # Starlette only reports the first partially matching route
            allowed = _allowed_methods(request.app, request.url.path)
            if allowed:
                headers["Allow"] = ", ".join(allowed)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=headers or None,
        )


def _allowed_methods(app: FastAPI, path: str) -> list[str]:
    """Every method some route serves on `path`, sorted."""
    methods: set[str] = set()
    for route in app.routes:
        regex = getattr(route, "path_regex", None)
        if regex is not None and regex.match(path):
            methods.update(getattr(route, "methods", None) or ())
    return sorted(methods)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )
