"""Database models for the application."""

from nexusblog.models.counter import POST_COUNTER_ID, PostCounterDB
from nexusblog.models.post import PostDB
from nexusblog.models.user import UserDB

__all__ = ["POST_COUNTER_ID", "PostCounterDB", "PostDB", "UserDB"]
