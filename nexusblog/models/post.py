"""Post database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime, Integer, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String


class PostDB(SQLModel, table=True):
    """
    Post database model.

    `no` is the public, sequential post number handed out by
    `PostCounterDB`; `id` stays the primary key.
    """

    __tablename__ = cast("declared_attr[str]", "posts")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Post ID",
    )
    no: int = Field(
        sa_column=Column(Integer, unique=True, nullable=False, index=True),
        description="Sequential post number",
    )
    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Post title",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Post content",
    )
    published: bool = Field(default=False, nullable=False)
    published_date: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Publish timestamp",
    )
    author_id: UUID = Field(
        sa_column=Column(
            "author_id",
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Author ID (foreign key to users.id)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "no": 42,
                "title": "Hello Nexus",
                "content": "First post on the platform.",
                "published": False,
                "author_id": "123e4567-e89b-12d3-a456-426614174000",
            },
        },
    )
