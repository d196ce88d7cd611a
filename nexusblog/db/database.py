"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from typing import Any

from sqlalchemy import event, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from nexusblog.configs import file_logger, settings
from nexusblog.errors.database import DatabaseInitializationError
from nexusblog.models import POST_COUNTER_ID, PostCounterDB

logger = file_logger(getLogger(__name__))

STATEMENT_TIMEOUT_MS = 30000


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkout")
    def on_checkout(
        dbapi_connection: object,
        connection_record: object,
        connection_proxy: object,
    ) -> None:
        logger.debug("Connection checked out from pool")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


def engine_kwargs(url: str) -> dict[str, Any]:
    """
    Build `create_async_engine` keyword arguments for the given database URL.

    PostgreSQL gets a sized pool and server-side statement timeouts; SQLite
    only gets a busy timeout, since it serialises writers itself.
    """
    if url.startswith("sqlite"):
        return {"connect_args": {"timeout": STATEMENT_TIMEOUT_MS / 1000}}

    return {
        "pool_size": settings.POOL_SIZE,
        "max_overflow": settings.MAX_OVERFLOW,
        "pool_timeout": settings.POOL_TIMEOUT,
        "pool_recycle": settings.POOL_RECYCLE,
        "pool_pre_ping": True,
        "connect_args": {
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        },
    }


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[SQLModelAsyncSession]:
    return async_sessionmaker(
        engine,
        class_=SQLModelAsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    **engine_kwargs(settings.DATABASE_URL),
)

if settings.DEBUG:
    _configure_engine_events(engine)

async_session_maker = create_session_maker(engine)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    The session runs inside `transaction()`, so everything a request does
    commits together when the handler returns and rolls back if it raises.

    Yields:
        AsyncSession: Database session
    """
    async with transaction() as session:
        yield session


@asynccontextmanager
async def transaction(
    session_maker: async_sessionmaker[SQLModelAsyncSession] | None = None,
) -> AsyncGenerator[AsyncSession]:
    """
    Context manager for explicit transaction management.

    Args:
        session_maker: Session factory to use, defaults to the application one

    Yields:
        AsyncSession: Database session within a transaction

    Example:
        ```python
        async with transaction() as session:
            session.add(UserDB(email="a@b.c", password="..."))
            # Commits on successful exit, rolls back on exception
        ```
    """
    async with (session_maker or async_session_maker)() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError:
            await session.rollback()
            logger.exception("Transaction error")
            raise
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def ensure_post_counter(session: AsyncSession) -> None:
    """Insert the single post counter row if it does not exist yet."""
    result = await session.execute(
        select(PostCounterDB).where(PostCounterDB.id == POST_COUNTER_ID),
    )
    if result.scalar_one_or_none() is None:
        session.add(PostCounterDB(id=POST_COUNTER_ID, count=0))
        await session.flush()
        logger.info("Post counter seeded")


async def init_db(target: AsyncEngine | None = None) -> None:
    """
    Create all tables and seed the post counter.

    Args:
        target: Engine to initialise, defaults to the application engine

    Raises:
        DatabaseInitializationError: If the schema or the counter row cannot be created
    """
    db_engine = target or engine
    try:
        async with db_engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        async with transaction(create_session_maker(db_engine)) as session:
            await ensure_post_counter(session)
    except SQLAlchemyError as e:
        raise DatabaseInitializationError from e

    logger.info("Database initialized successfully!")


async def ping_db() -> bool:
    """Return True when the database answers a trivial query."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError):
        logger.exception("Database ping failed")
        return False
    return True


async def close_db() -> None:
    """Close database connections."""
    await engine.dispose()
    logger.info("Database connections closed")
