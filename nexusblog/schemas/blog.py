"""
Post schemas for the Nexus Blog API.

Request bodies for publishing and editing posts, the search scope enum, and
the response envelopes the frontend consumes. Wire names are camelCase
(`publishedDate`, `authorId`).
"""

from datetime import datetime
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from nexusblog.configs.settings import MAX_CONTENT_LENGTH, MAX_TITLE_LENGTH


class QType(StrEnum):
    """Search scope selector."""

    ALL = "All"
    AUTHOR = "Author"
    CONTENT = "Content"


class PostCreate(BaseModel):
    """Body of `POST /blog/`. The author comes from the bearer token."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TITLE_LENGTH,
        description="Post title",
        examples=["Hello Nexus"],
    )
    content: str = Field(
        ...,
        min_length=1,
        max_length=MAX_CONTENT_LENGTH,
        description="Post content",
        examples=["First post on the platform."],
    )


class PostUpdate(BaseModel):
    """Body of `PUT /blog/`. Omitted fields keep their stored value."""

    model_config = ConfigDict(extra="ignore")

    id: UUID = Field(..., description="ID of the post to update")
    title: str | None = Field(default=None, min_length=1, max_length=MAX_TITLE_LENGTH)
    content: str | None = Field(default=None, min_length=1, max_length=MAX_CONTENT_LENGTH)


class AuthorName(BaseModel):
    """Denormalised author info attached to every post response."""

    name: str | None = None


class PostResponse(BaseModel):
    """A post with its author's name."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    no: int
    title: str
    content: str
    published: bool = False
    published_date: datetime = Field(alias="publishedDate")
    author_id: UUID = Field(alias="authorId")
    author: AuthorName


class PostCreatedResponse(BaseModel):
    id: UUID
    no: int


class PostUpdatedResponse(BaseModel):
    id: UUID


class PostEnvelope(BaseModel):
    blog: PostResponse


class PostListResponse(BaseModel):
    blogs: list[PostResponse]


class SearchResponse(BaseModel):
    blogs: list[PostResponse]
    success: bool = True
