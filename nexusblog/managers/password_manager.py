"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing is CPU bound, so the async helpers push it onto a small thread pool
instead of blocking the event loop.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor
from logging import getLogger

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from nexusblog.configs import file_logger
from nexusblog.errors import PasswordHashingError

executor = ThreadPoolExecutor(max_workers=4)
logger = file_logger(getLogger(__name__))


class PasswordHasher:
    """Argon2id hashing and verification for user passwords."""

    def __init__(self) -> None:
        self.pwd_context = CryptContext(schemes=["argon2"])

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Error hashing password")
            raise PasswordHashingError from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """Verify a plaintext password against a stored hash."""
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False


_default_hasher = PasswordHasher()


def get_password_hasher() -> PasswordHasher:
    return _default_hasher


async def hash_password(password: str) -> str:
    """Hash a password off the event loop."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str) -> bool:
    """Verify a password off the event loop."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )
