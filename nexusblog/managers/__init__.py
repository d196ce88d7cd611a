from nexusblog.managers.password_manager import (
    PasswordHasher,
    hash_password,
    verify_password,
)
from nexusblog.managers.rate_limiter import limiter, rate_limit_exceeded_handler
from nexusblog.managers.token_manager import (
    JwtTokenVerifier,
    create_access_token,
    decode_access_token,
)

__all__ = [
    "JwtTokenVerifier",
    "PasswordHasher",
    "create_access_token",
    "decode_access_token",
    "hash_password",
    "limiter",
    "rate_limit_exceeded_handler",
    "verify_password",
]
