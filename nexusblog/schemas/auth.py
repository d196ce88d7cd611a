from uuid import UUID

from pydantic import BaseModel


class Token(BaseModel):
    """Signed JWT handed to the frontend after signup/signin."""

    jwt: str


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    user_id: UUID
