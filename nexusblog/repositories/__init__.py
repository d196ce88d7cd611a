"""Repository layer for database operations."""

from nexusblog.repositories.post import SqlPostRepository
from nexusblog.repositories.user import UserRepository

__all__ = ["SqlPostRepository", "UserRepository"]
