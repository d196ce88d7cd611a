"""User repository for database operations."""

from uuid import UUID

from sqlalchemy import select
from sqlmodel import col

from nexusblog.errors.database import DuplicateEntryError
from nexusblog.models.user import UserDB
from nexusblog.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserDB]):
    """Repository for User database operations."""

    model = UserDB

    async def create(self, email: str, password_hash: str, name: str | None = None) -> UserDB:
        """
        Create a new user.

        Args:
            email: Unique email address
            password_hash: Already hashed password
            name: Optional display name

        Returns:
            UserDB: Created user

        Raises:
            DuplicateEntryError: If the email is already registered
        """
        try:
            return await self._save(UserDB(email=email, password=password_hash, name=name))
        except DuplicateEntryError as e:
            raise DuplicateEntryError(detail=f"Email '{email}' already exists") from e

    async def get_by_id(self, user_id: UUID) -> UserDB | None:
        return await self._get(user_id)

    async def get_by_email(self, email: str) -> UserDB | None:
        result = await self.session.execute(select(UserDB).where(col(UserDB.email) == email))
        return result.scalar_one_or_none()
