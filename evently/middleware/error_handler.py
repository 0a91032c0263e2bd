"""
Error handling middleware for the application.

This module maps domain exceptions to HTTP status codes so that every
endpoint returns the same error envelope.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from evently.utils.api_response import error_response
from evently.exceptions import (
    DataAccessError,
    EventlyError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

# Configure logging
logger = logging.getLogger(__name__)


def add_error_handlers(app: FastAPI) -> None:
    """
    Add error handlers to the FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Handle HTTP exceptions."""
        logger.warning(f"HTTP exception: {exc.detail} (status_code={exc.status_code})")
        return JSONResponse(
            content=error_response(message=str(exc.detail), code="http_error"),
            status_code=exc.status_code
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle request validation errors."""
        error_messages = []
        for error in exc.errors():
            loc = " -> ".join(str(loc_item) for loc_item in error["loc"])
            error_messages.append(f"{loc}: {error['msg']}")

        logger.warning(f"Validation error: {', '.join(error_messages)}")
        return JSONResponse(
            content=error_response(
                message="Validation error",
                code="validation_error",
                details={"errors": error_messages}
            ),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        """Handle missing users and events."""
        return JSONResponse(
            content=error_response(message=str(exc) or "Not found", code="not_found"),
            status_code=status.HTTP_404_NOT_FOUND
        )

    @app.exception_handler(UnauthorizedError)
    async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
        """Handle writes by someone other than the organizer."""
        return JSONResponse(
            content=error_response(message=str(exc), code="unauthorized"),
            status_code=status.HTTP_403_FORBIDDEN
        )

    @app.exception_handler(ValidationError)
    async def domain_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        """Handle missing or malformed arguments caught by the services."""
        return JSONResponse(
            content=error_response(message=str(exc), code="validation_error"),
            status_code=status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(DataAccessError)
    async def data_access_handler(request: Request, exc: DataAccessError) -> JSONResponse:
        """Handle failures already logged by the data layer."""
        return JSONResponse(
            content=error_response(message="Database error occurred", code="database_error"),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    @app.exception_handler(EventlyError)
    async def evently_error_handler(request: Request, exc: EventlyError) -> JSONResponse:
        """Handle any other domain error."""
        logger.error(f"Unhandled domain error: {exc}")
        return JSONResponse(
            content=error_response(message=str(exc), code="evently_error"),
            status_code=status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        """Handle database errors raised outside the services."""
        logger.error(f"Database error: {str(exc)}")
        return JSONResponse(
            content=error_response(message="Database error occurred", code="database_error"),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle all other exceptions."""
        logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
        return JSONResponse(
            content=error_response(
                message="An unexpected error occurred",
                code="server_error",
                details={"type": type(exc).__name__}
            ),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
