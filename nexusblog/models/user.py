"""User database model using SQLModel."""

from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class UserDB(SQLModel, table=True):
    """
    User database model.

    Owns zero or more posts through `PostDB.author_id`. The `password`
    column only ever holds an argon2 hash.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )
    email: str = Field(
        sa_column=Column(String(255), unique=True, nullable=False, index=True),
        description="Email address (unique)",
    )
    name: str | None = Field(
        default=None,
        sa_column=Column(String(100)),
        description="Display name",
    )
    password: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Hashed password",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "email": "aditya@example.com",
                "name": "Aditya",
            },
        },
    )
