"""Authentication errors."""

from logging import getLogger

from starlette.status import HTTP_403_FORBIDDEN, HTTP_500_INTERNAL_SERVER_ERROR

from nexusblog.configs import file_logger
from nexusblog.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Unauthorized",
        status_code: int = HTTP_403_FORBIDDEN,
    ) -> None:
        super().__init__(detail, status_code)


class MissingTokenError(UserAuthenticationError):
    """Raised when the Authorization header is absent or empty."""

    def __init__(self) -> None:
        super().__init__("User not logged in!")


class InvalidTokenError(UserAuthenticationError):
    """Raised when the bearer token is malformed or fails verification."""

    def __init__(self, detail: str = "Unauthorized") -> None:
        super().__init__(detail)


class InvalidCredentialsError(UserAuthenticationError):
    """Raised when signin credentials do not match a user."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class PasswordHashingError(BaseAppError):
    """Raised when a password cannot be hashed."""

    def __init__(self, detail: str = "Failed to hash password") -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


auth_exception_handler = create_exception_handler(logger)
