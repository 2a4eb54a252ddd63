"""
Error handling for applications serving repository results over FastAPI.

Maps repository and database exceptions to consistent JSON error responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from sql_repository.exceptions import (
    ConnectionNotConfiguredError,
    RecordNotFoundError,
    RepositoryError,
)
from sql_repository.utils.api_response import error_response

logger = logging.getLogger(__name__)


def add_error_handlers(app: FastAPI) -> None:
    """
    Add error handlers to the FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(RecordNotFoundError)
    async def record_not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:
        """Handle missing records."""
        logger.warning(f"Record not found: {exc}")
        return JSONResponse(
            content=error_response(
                message=str(exc),
                code="record_not_found",
                details={"table": exc.table}
            ),
            status_code=status.HTTP_404_NOT_FOUND
        )

    @app.exception_handler(ConnectionNotConfiguredError)
    async def connection_error_handler(request: Request, exc: ConnectionNotConfiguredError) -> JSONResponse:
        """Handle unknown connection names."""
        logger.error(f"Connection error: {exc}")
        return JSONResponse(
            content=error_response(
                message="Database connection is not configured",
                code="connection_error"
            ),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    @app.exception_handler(RepositoryError)
    async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
        """Handle other repository errors."""
        error_msg = str(exc) or "Error processing query"
        logger.error(f"Repository error: {error_msg}")
        return JSONResponse(
            content=error_response(
                message=error_msg,
                code="repository_error"
            ),
            status_code=status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        """Handle database errors."""
        logger.error(f"Database error: {str(exc)}")
        return JSONResponse(
            content=error_response(
                message="Database error occurred",
                code="database_error"
            ),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
