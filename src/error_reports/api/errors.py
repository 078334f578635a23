"""Exception handlers mapping domain errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from error_reports.domain.errors import (
    ErrorReportsError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
    PersistenceError,
)

logger = logging.getLogger(__name__)

_STATUS_CODES: dict[type[ErrorReportsError], int] = {
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    PersistenceError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def error_reports_error_handler(
    request: Request, exc: ErrorReportsError
) -> JSONResponse:
    """Convert an application error into a JSON error response."""
    status_code = _STATUS_CODES.get(
        type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    log = logger.error if status_code >= 500 else logger.info
    log(
        "%s: %s",
        exc.error_code,
        exc.message,
        extra={"error_id": exc.error_id, "path": request.url.path},
    )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """Register the application's exception handlers."""
    app.add_exception_handler(ErrorReportsError, error_reports_error_handler)
