"""Token manager for issuing and verifying JWT bearer tokens."""

from datetime import UTC, datetime, timedelta
from logging import getLogger
from uuid import UUID

from jose import JWTError, jwt

from nexusblog.configs import file_logger, settings
from nexusblog.schemas.auth import TokenData

logger = file_logger(getLogger(__name__))


def _secret() -> str:
    return settings.JWT_SECRET.get_secret_value()


def create_access_token(
    user_id: UUID,
    expires_delta: timedelta | None = None,
    secret: str | None = None,
) -> str:
    """
    Create a new access token whose subject claim is `id`.

    Args:
        user_id: User's UUID
        expires_delta: Optional expiration time delta
        secret: Signing secret, defaults to `JWT_SECRET`

    Returns:
        str: Encoded JWT access token
    """
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))

    to_encode = {
        "id": str(user_id),
        "iat": now,
        "exp": expire,
    }

    return jwt.encode(to_encode, secret or _secret(), algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, secret: str | None = None) -> TokenData | None:
    """
    Decode and validate an access token.

    Args:
        token: JWT token string
        secret: Verification secret, defaults to `JWT_SECRET`

    Returns:
        TokenData | None: Decoded token data or None if invalid
    """
    try:
        payload = jwt.decode(token, secret or _secret(), algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None

    user_id = payload.get("id")
    if not user_id:
        return None

    try:
        return TokenData(user_id=UUID(str(user_id)))
    except ValueError:
        logger.warning("Token subject is not a valid user id")
        return None


class JwtTokenVerifier:
    """`TokenVerifier` backed by python-jose and a shared HMAC secret."""

    def __init__(self, secret: str | None = None) -> None:
        self._secret = secret

    def verify(self, token: str) -> TokenData | None:
        return decode_access_token(token, self._secret)
