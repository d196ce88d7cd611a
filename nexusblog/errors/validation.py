"""Custom validation error handling for FastAPI."""

from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from nexusblog.configs import file_logger
from nexusblog.errors.base import BaseAppError, create_exception_handler
from nexusblog.utils.helpers import host

logger = file_logger(getLogger(__name__))


class InvalidQueryTypeError(BaseAppError):
    """Raised when a search `qtype` is not one of All, Author or Content."""

    def __init__(self, qtype: str) -> None:
        super().__init__("Invalid query type specified", HTTP_400_BAD_REQUEST)
        self.qtype = qtype


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request validation errors with a cleaner response format.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)

    formatted_errors = []
    for error in exec_error.errors():
        formatted_error = {
            "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),  # Skip 'body'
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        if "ctx" in error:
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in error["ctx"].items()
            }
        formatted_errors.append(formatted_error)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "detail": "Inputs are not correct",
            "success": False,
            "errors": formatted_errors,
        },
    )


query_exception_handler = create_exception_handler(logger)
