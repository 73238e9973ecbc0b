"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.posts.errors import (
    InvalidPostError,
    PostDomainError,
    PostNotFoundError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(PostNotFoundError)
    async def handle_post_not_found(
        _request: Request, exc: PostNotFoundError
    ) -> JSONResponse:
        """Handle lookups of unknown post ids."""
        logger.warning("Post not found: %s", exc.post_id)
        return _error_response(HTTP_404, "Post not found")

    @app.exception_handler(InvalidPostError)
    async def handle_invalid_post(
        _request: Request, exc: InvalidPostError
    ) -> JSONResponse:
        """Handle posts rejected by the validator."""
        logger.warning("Invalid post: %s", ", ".join(exc.errors))
        return _error_response(HTTP_400, "Invalid post")

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle unreadable payloads and mistyped path parameters."""
        logger.warning("Request validation failed: %d error(s)", len(exc.errors()))
        return _error_response(HTTP_400, "Invalid post")

    @app.exception_handler(PostDomainError)
    async def handle_post_domain(
        _request: Request, exc: PostDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled posts domain errors."""
        logger.error("Unhandled posts domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
