"""Error Handlers — global exception handlers for the members API.

Invariants:
    - Every error body is {"message": str}
    - MemberApiError → its http_status and public message
    - RequestValidationError → 400, HTTPException (unknown route, bad method) → its status
    - Exception (catch-all) → 500 "Server error", never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from member_api.core.errors import MemberApiError

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_member_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_member_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(MemberApiError)
    async def member_api_error_handler(request: Request, exc: MemberApiError):
        """Handle domain and storage errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={**exc.to_log_extra(), "path": request.url.path},
            exc_info=exc if exc.http_status >= 500 else None,
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request"},
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Uniform body for router-level errors (404 unknown path, 405 method)."""
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            logger.warning(
                f"404 NOT FOUND: {request.url.path}",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": exc.status_code,
                },
            )
        detail = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": detail},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"path": request.url.path},
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": SERVER_ERROR_MESSAGE},
        )
