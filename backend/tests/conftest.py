"""Shared fixtures: a fresh SQLite database per test and an HTTP client bound to it."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from accounts.common.config import settings
from accounts.common.database import DatabaseManager, get_session
from accounts.main import app


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    """Minimum bcrypt cost keeps the suite fast."""
    monkeypatch.setattr(settings, "bcrypt_rounds", 4)


@pytest_asyncio.fixture
async def db(tmp_path):
    manager = DatabaseManager()
    await manager.initialize(f"sqlite+aiosqlite:///{tmp_path / 'accounts_test.db'}")
    await manager.create_tables()
    yield manager
    await manager.dispose()


@pytest_asyncio.fixture
async def session(db):
    async with db.session() as session:
        yield session


def _override_session(db):
    async def override_get_session():
        async with db.session() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session


@pytest_asyncio.fixture
async def client(db):
    _override_session(db)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def server_client(db):
    """Client that sees the 500 response instead of the re-raised server error."""
    _override_session(db)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
