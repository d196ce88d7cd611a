"""Database engine and session management."""

from nexusblog.db.database import (
    async_session_maker,
    close_db,
    engine,
    ensure_post_counter,
    get_session,
    init_db,
    ping_db,
    transaction,
)

__all__ = [
    "engine",
    "async_session_maker",
    "get_session",
    "init_db",
    "close_db",
    "ensure_post_counter",
    "ping_db",
    "transaction",
]
