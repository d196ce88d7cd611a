"""Protocol definitions for the injectable seams of the blog API.

Route handlers only see these interfaces; the SQL repository and the JWT
verifier are the production implementations, and tests swap in fakes through
FastAPI dependency overrides.
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from nexusblog.models import PostDB
from nexusblog.schemas.auth import TokenData
from nexusblog.schemas.blog import PostCreate, PostUpdate, QType

type PostRow = tuple[PostDB, str | None]
"""A post paired with its author's name."""


@runtime_checkable
class TokenVerifier(Protocol):
    """Verifies a bearer token and extracts its subject."""

    def verify(self, token: str) -> TokenData | None:
        """Return the decoded token data, or None if the token is not valid."""
        ...


@runtime_checkable
class PostRepository(Protocol):
    """Data access for posts."""

    async def create(self, post: PostCreate, author_id: UUID) -> PostDB:
        """Assign the next post number and insert the post, atomically."""
        ...

    async def update(self, post_update: PostUpdate) -> PostDB | None:
        """Merge supplied fields into the stored post, None if it does not exist."""
        ...

    async def get_by_id(self, post_id: UUID) -> PostRow | None:
        """Get a post by primary key."""
        ...

    async def get_by_no(self, no: int) -> PostRow | None:
        """Get a post by its sequential number."""
        ...

    async def list_recent(self, limit: int) -> list[PostRow]:
        """Get the most recent posts."""
        ...

    async def search(self, filter_text: str, qtype: QType, limit: int) -> list[PostRow]:
        """Substring search scoped by `qtype`."""
        ...
