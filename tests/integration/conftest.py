"""Integration test fixtures backed by a real database.

Each test gets a fresh SQLite file through aiosqlite with foreign keys
enforced, so inserts, constraints and commits go through SQLAlchemy the
same way they do against Postgres. The repository_manager fixture is
overridden here, so the service fixtures of the root conftest run on
the real repositories.
"""

from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from src.events_api.api.dependencies.db import get_db_session
from src.events_api.core.db import create_tables, get_session
from src.events_api.main import create_app
from src.events_api.repositories import RepositoryManager


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Create a file-backed SQLite engine with all tables."""
    test_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'events.db'}")

    @event.listens_for(test_engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    await create_tables(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def open_session(engine: AsyncEngine) -> Callable[[], AbstractAsyncContextManager[AsyncSession]]:
    """Open extra sessions, e.g. to read back what another session committed."""
    return lambda: get_session(engine)


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    async with get_session(engine) as session:
        yield session


@pytest.fixture
def repository_manager(db_session: AsyncSession) -> RepositoryManager:
    return RepositoryManager(db_session)


@pytest.fixture
def app(engine: AsyncEngine) -> FastAPI:
    """App whose request sessions come from the test engine."""

    async def _test_db_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    app = create_app()
    app.dependency_overrides[get_db_session] = _test_db_session
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
