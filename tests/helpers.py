"""Shared HTTP helpers for API tests."""

from uuid import UUID

from httpx import AsyncClient
from sqlalchemy.exc import IntegrityError

from src.events_api.models import Role
from tests.fakes import FakeRepositoryManager


async def register_and_login(
    client: AsyncClient,
    username: str = "alice",
    password: str = "Pwd123!",
) -> tuple[dict, str]:
    """Register a user over HTTP, log in, and return (user json, access token)."""
    response = await client.post(
        "/api/v1/auth/register",
        json={"username": username, "email": f"{username}@x.com", "password": password},
    )
    assert response.status_code == 201, response.text
    user = response.json()

    response = await client.post(
        "/api/v1/auth/login", json={"username": username, "password": password}
    )
    assert response.status_code == 200, response.text
    return user, response.json()["access_token"]


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def set_role(repository_manager: FakeRepositoryManager, user: dict, role: Role) -> None:
    """Change a stored user's role directly, bypassing the API."""
    repository_manager.user.rows[UUID(user["id"])].role = role.value


def unique_violation(constraint: str) -> IntegrityError:
    """IntegrityError shaped like a Postgres unique violation on constraint."""
    return IntegrityError(
        "INSERT", {}, Exception(f'duplicate key value violates unique constraint "{constraint}"')
    )


def foreign_key_violation(constraint: str) -> IntegrityError:
    """IntegrityError shaped like a Postgres foreign key violation on constraint."""
    return IntegrityError(
        "INSERT", {}, Exception(f'insert violates foreign key constraint "{constraint}"')
    )
