"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses share the {"error", "message"} shape.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.allocation.errors import (
    AccountNotFoundError,
    AllocationDomainError,
    InternalError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

VALIDATION_FAILED = "Validation failed"
INTERNAL_ERROR = "Internal server error"
INTERNAL_ERROR_MESSAGE = "An error occurred while processing your request"


def _error_response(status_code: int, error: str, message: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if message:
        body["message"] = message
    return JSONResponse(status_code=status_code, content=body)


def _first_validation_message(exc: RequestValidationError) -> str:
    """Describe the first failed constraint of a request body."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field_path = [str(part) for part in first.get("loc", ()) if part != "body"]
    msg = first.get("msg", "Invalid value")
    if field_path:
        return f"{'.'.join(field_path)}: {msg}"
    return msg


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation(
        _request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle caller-correctable input errors."""
        logger.warning("Validation failed: %s", exc.message)
        return _error_response(HTTP_400, VALIDATION_FAILED, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed JSON and wrongly typed fields."""
        message = _first_validation_message(exc)
        logger.warning("Request validation failed: %s", message)
        return _error_response(HTTP_400, VALIDATION_FAILED, message)

    @app.exception_handler(AccountNotFoundError)
    async def handle_account_not_found(
        _request: Request, exc: AccountNotFoundError
    ) -> JSONResponse:
        """Handle lookups of investors that never deposited."""
        logger.warning("Account not found: %s", exc.investor)
        return _error_response(HTTP_404, "Not found", "Investor account not found")

    @app.exception_handler(InternalError)
    async def handle_internal(
        _request: Request, exc: InternalError
    ) -> JSONResponse:
        """Handle ledger failures. The ledger already rolled back."""
        logger.error("Ledger internal error: %s", exc.reason)
        return _error_response(HTTP_500, INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(AllocationDomainError)
    async def handle_allocation_domain(
        _request: Request, exc: AllocationDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled allocation domain errors."""
        logger.error("Unhandled allocation domain error: %s", exc.message)
        return _error_response(HTTP_500, INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Render framework HTTP errors (404, 405) in the common shape."""
        if exc.status_code == HTTP_404:
            return _error_response(HTTP_404, "Not Found", "Route not found")
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE)
