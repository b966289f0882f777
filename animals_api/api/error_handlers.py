"""Error Handlers — global exception handlers for the Animals API.

Invariants:
    - AnimalsApiError → exc.http_status with exc.to_response()
    - RequestValidationError (unparseable body) → 400 with field-error tree
    - Starlette HTTPException (unknown route, wrong method) → {"error": detail}
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain, request validation, routing, catch-all
    - Every body has a string "error" key so clients parse one shape
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from animals_api.core.errors import AnimalsApiError
from animals_api.core.validate_animal import build_error_tree

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Animals API domain error handler."""

    @app.exception_handler(AnimalsApiError)
    async def domain_error_handler(request: Request, exc: AnimalsApiError):
        """Handle all Animals API domain errors."""
        logger.info(
            f"{exc.code}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed request bodies."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "REQUEST_VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request data",
                "details": build_error_tree(list(exc.errors())),
            },
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing-level HTTP error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all. Never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )
