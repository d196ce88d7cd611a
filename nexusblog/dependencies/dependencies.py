# nexusblog/dependencies/dependencies.py

"""Application dependencies: bearer token guard, repositories and services."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from nexusblog.db import get_session
from nexusblog.errors.auth import InvalidTokenError, MissingTokenError
from nexusblog.managers.token_manager import JwtTokenVerifier
from nexusblog.protocols import PostRepository, TokenVerifier
from nexusblog.repositories import SqlPostRepository, UserRepository
from nexusblog.services import AuthService

BEARER_SCHEME = "bearer"

_token_verifier = JwtTokenVerifier()


def get_token_verifier() -> TokenVerifier:
    """Resolve the `TokenVerifier` used by the bearer token guard."""
    return _token_verifier


TokenVerifierDep = Annotated[TokenVerifier, Depends(get_token_verifier)]


def require_user_id(
    request: Request,
    verifier: TokenVerifierDep,
    authorization: Annotated[str | None, Header()] = None,
) -> UUID:
    """
    Verify the bearer token and expose its subject as `request.state.user_id`.

    Mounted as a router-level dependency, so it runs before any handler
    dependency that opens a database session.

    Parameters
    ----------
    request : Request
        Current request context.
    verifier : TokenVerifier
        Token verification strategy.
    authorization : str | None
        Raw `Authorization` header.

    Returns
    -------
    UUID
        Authenticated user id.

    Raises
    ------
    MissingTokenError
        If the header is absent or empty.
    InvalidTokenError
        If the header is not `Bearer <token>` or the token fails verification.
    """
    if not authorization:
        raise MissingTokenError

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME or not parts[1]:  # noqa: PLR2004
        raise InvalidTokenError

    token_data = verifier.verify(parts[1])
    if not token_data:
        raise InvalidTokenError

    request.state.user_id = token_data.user_id
    return token_data.user_id


CurrentUserIdDep = Annotated[UUID, Depends(require_user_id)]


def get_post_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> PostRepository:
    """
    Resolve the `PostRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    PostRepository
        Repository instance bound to the session.
    """
    return SqlPostRepository(session)


PostRepoDep = Annotated[PostRepository, Depends(get_post_repository)]


def get_user_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> UserRepository:
    return UserRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    return AuthService(user_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
