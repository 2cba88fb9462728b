# invest_tracker/core/errors.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    """A single-resource read matched no row."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DataStoreError(Exception):
    """A routine rejected the requested change (unknown row, insufficient units...)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def database_error_message(exc: SQLAlchemyError) -> str:
    """Driver message without SQLAlchemy's statement/parameters decoration."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": exc.message},
        )

    @app.exception_handler(DataStoreError)
    async def data_store_handler(request: Request, exc: DataStoreError) -> JSONResponse:
        logger.error("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": exc.message},
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        message = database_error_message(exc)
        logger.error("%s %s database error: %s", request.method, request.url.path, message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": message},
        )

    @app.exception_handler(OverflowError)
    async def overflow_handler(request: Request, exc: OverflowError) -> JSONResponse:
        # ids in request bodies past the driver's integer range
        logger.error("%s %s database error: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )
