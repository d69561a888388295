"""HTTP client fixtures.

The app runs in-process through ASGITransport with the repository manager
swapped for the in-memory one, so no database is needed.
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.events_api.api.dependencies import get_repository_manager
from src.events_api.main import create_app
from src.events_api.models import Role
from tests.fakes import FakeRepositoryManager
from tests.helpers import auth_header, register_and_login, set_role


@pytest.fixture
def app(repository_manager: FakeRepositoryManager) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_repository_manager] = lambda: repository_manager
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
async def admin_headers(
    client: AsyncClient, repository_manager: FakeRepositoryManager
) -> dict[str, str]:
    user, token = await register_and_login(client, "root_admin")
    set_role(repository_manager, user, Role.ADMIN)
    return auth_header(token)


@pytest.fixture
async def manager_headers(
    client: AsyncClient, repository_manager: FakeRepositoryManager
) -> dict[str, str]:
    user, token = await register_and_login(client, "event_manager")
    set_role(repository_manager, user, Role.MANAGER)
    return auth_header(token)
