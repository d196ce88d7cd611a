# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os
from tempfile import mkdtemp

# Settings are read at import time, so the environment must be in place
# before anything from nexusblog is imported
_TEST_DB_DIR = mkdtemp(prefix="nexusblog-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/nexusblog.db"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["LOG_TO_FILE"] = "false"
os.environ["LIMITER_ENABLED"] = "false"

from collections.abc import AsyncGenerator, Generator  # noqa: E402
from pathlib import Path  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from nexusblog.db import get_session, init_db, transaction  # noqa: E402
from nexusblog.db.database import create_session_maker, engine_kwargs  # noqa: E402
from nexusblog.main import app  # noqa: E402
from nexusblog.managers import create_access_token, hash_password, limiter  # noqa: E402
from nexusblog.models import UserDB  # noqa: E402
from nexusblog.repositories import UserRepository  # noqa: E402

TEST_PASSWORD = "secret123"


@pytest.fixture
def user_password() -> str:
    return TEST_PASSWORD


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Fresh SQLite database file with tables and the post counter in place."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'nexusblog.db'}"
    db_engine = create_async_engine(url, **engine_kwargs(url))
    await init_db(db_engine)
    yield db_engine
    await db_engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker:
    return create_session_maker(engine)


@pytest.fixture
async def user(session_maker: async_sessionmaker) -> UserDB:
    """A stored user whose password is `TEST_PASSWORD`."""
    password_hash = await hash_password(TEST_PASSWORD)
    async with transaction(session_maker) as session:
        return await UserRepository(session).create(
            email="aditya@example.com",
            password_hash=password_hash,
            name="Aditya",
        )


@pytest.fixture
def auth_headers(user: UserDB) -> dict[str, str]:
    """Create auth headers with a valid access token."""
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def use_test_db(session_maker: async_sessionmaker) -> Generator[None]:
    """Point the app's session dependency at the per-test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession]:
        async with transaction(session_maker) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def client(use_test_db: None) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    previous = limiter.enabled
    limiter.enabled = False
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    limiter.enabled = previous
