"""Error taxonomy shared by services, adapters and request handlers."""

from uuid import uuid4


class ErrorReportsError(Exception):
    """Base exception for the error reports application."""

    error_code: str = "ERROR_REPORTS_ERROR"

    def __init__(self, message: str, error_id: str | None = None) -> None:
        self.message = message
        self.error_id = error_id or str(uuid4())
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        """Return the error as a response payload."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "error_id": self.error_id,
        }


class InvalidArgumentError(ErrorReportsError):
    """A caller passed arguments the service cannot act on."""

    error_code: str = "INVALID_ARGUMENT"


class NotFoundError(ErrorReportsError):
    """The requested entity does not exist."""

    error_code: str = "NOT_FOUND"


class ForbiddenError(ErrorReportsError):
    """The actor is not allowed to perform the request."""

    error_code: str = "FORBIDDEN"


class PersistenceError(ErrorReportsError):
    """A write to the database or audit log failed."""

    error_code: str = "PERSISTENCE_ERROR"
