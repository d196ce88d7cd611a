"""Authentication service handling signup and signin."""

from logging import getLogger

from nexusblog.configs import file_logger
from nexusblog.errors.auth import InvalidCredentialsError
from nexusblog.managers.password_manager import hash_password, verify_password
from nexusblog.managers.token_manager import create_access_token
from nexusblog.models import UserDB
from nexusblog.repositories import UserRepository
from nexusblog.schemas.auth import Token
from nexusblog.schemas.user import SigninInput, SignupInput

logger = file_logger(getLogger(__name__))


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def signup(self, payload: SignupInput) -> Token:
        """
        Register a user and issue their first token.

        Args:
            payload: Email, password and optional name

        Returns:
            Token: Signed JWT for the new user

        Raises:
            DuplicateEntryError: If the email is already registered
        """
        password_hash = await hash_password(payload.password.get_secret_value())
        user = await self.user_repo.create(
            email=str(payload.email),
            password_hash=password_hash,
            name=payload.name,
        )
        logger.info(f"User {user.id} signed up")
        return self.create_token_for_user(user)

    async def signin(self, payload: SigninInput) -> Token:
        """
        Check credentials and issue a token.

        Args:
            payload: Email and password

        Returns:
            Token: Signed JWT

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user = await self.user_repo.get_by_email(str(payload.email))
        if not user:
            raise InvalidCredentialsError

        if not await verify_password(payload.password.get_secret_value(), user.password):
            raise InvalidCredentialsError

        return self.create_token_for_user(user)

    def create_token_for_user(self, user: UserDB) -> Token:
        return Token(jwt=create_access_token(user_id=user.id))
