from nexusblog.schemas.auth import Token, TokenData
from nexusblog.schemas.blog import (
    AuthorName,
    PostCreate,
    PostCreatedResponse,
    PostEnvelope,
    PostListResponse,
    PostResponse,
    PostUpdate,
    PostUpdatedResponse,
    QType,
    SearchResponse,
)
from nexusblog.schemas.health import HealthCheckResponse
from nexusblog.schemas.user import SigninInput, SignupInput

__all__ = [
    "AuthorName",
    "HealthCheckResponse",
    "PostCreate",
    "PostCreatedResponse",
    "PostEnvelope",
    "PostListResponse",
    "PostResponse",
    "PostUpdate",
    "PostUpdatedResponse",
    "QType",
    "SearchResponse",
    "SigninInput",
    "SignupInput",
    "Token",
    "TokenData",
]
