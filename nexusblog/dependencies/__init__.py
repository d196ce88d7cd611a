# nexusblog/dependencies/__init__.py

from nexusblog.dependencies.dependencies import (
    AuthServiceDep,
    CurrentUserIdDep,
    PostRepoDep,
    TokenVerifierDep,
    UserRepoDep,
    get_auth_service,
    get_post_repository,
    get_token_verifier,
    get_user_repository,
    require_user_id,
)

__all__ = [
    "AuthServiceDep",
    "CurrentUserIdDep",
    "PostRepoDep",
    "TokenVerifierDep",
    "UserRepoDep",
    "get_auth_service",
    "get_post_repository",
    "get_token_verifier",
    "get_user_repository",
    "require_user_id",
]
