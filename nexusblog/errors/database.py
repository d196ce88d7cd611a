"""
Data store errors.

Repositories translate SQLAlchemy failures into these, so route handlers and
clients only ever see `{"detail", "success": false}` bodies. Anything the
repositories miss is caught by `sqlalchemy_exception_handler`.
"""

from logging import getLogger

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import (
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from nexusblog.configs import file_logger
from nexusblog.configs.settings import DEFAULT_ERROR_MESSAGE
from nexusblog.errors.base import BaseAppError, create_exception_handler
from nexusblog.utils.helpers import host

logger = file_logger(getLogger(__name__))


class DatabaseError(BaseAppError):
    """Root of the data store errors; 500 unless a subclass says otherwise."""

    def __init__(
        self,
        detail: str = "Data store error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail, status_code)


class DatabaseInitializationError(DatabaseError):
    """Tables or the post counter row could not be created at startup."""

    def __init__(self, detail: str = "Could not prepare the blog database") -> None:
        super().__init__(detail)


class DuplicateEntryError(DatabaseError):
    """A unique column (user email, post number) already holds the value."""

    def __init__(self, detail: str = "Entry already exists") -> None:
        super().__init__(detail, HTTP_409_CONFLICT)


class RecordNotFoundError(DatabaseError):
    """No user or post matches the requested key."""

    def __init__(self, detail: str = "Not found") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class TransactionError(DatabaseError):
    """A write was rolled back; nothing it touched was kept."""

    def __init__(self, detail: str = DEFAULT_ERROR_MESSAGE) -> None:
        super().__init__(detail)


database_exception_handler = create_exception_handler(logger)


async def sqlalchemy_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Answer an unmapped SQLAlchemy failure with the generic 500 body.

    The driver message stays in the log only.

    Args:
        request: The incoming request.
        exc: The SQLAlchemyError that escaped the repositories.

    Returns:
        ORJSONResponse with `DEFAULT_ERROR_MESSAGE`.
    """
    logger.error(
        f"Unhandled data store error for ip: {host(request)} at endpoint {request.url.path}",
        exc_info=exc,
    )
    return ORJSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": DEFAULT_ERROR_MESSAGE, "success": False},
    )
