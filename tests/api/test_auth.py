"""Tests for the authentication endpoints."""

import pytest

from tests.helpers import auth_header, register_and_login

pytestmark = pytest.mark.unit

REGISTER = "/api/v1/auth/register"
LOGIN = "/api/v1/auth/login"
REFRESH = "/api/v1/auth/refresh"
LOGOUT = "/api/v1/auth/logout"


def use_refresh_cookie(client, value: str) -> None:
    client.cookies.clear()
    client.cookies.set("refresh_token", value)


async def test_register(client):
    response = await client.post(
        REGISTER, json={"username": "alice", "email": "a@x.com", "password": "Pwd123!"}
    )

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "alice"
    assert body["role"] == "user"
    assert "password" not in body
    assert "hashed_password" not in body


async def test_register_duplicate_username(client):
    payload = {"username": "alice", "email": "a@x.com", "password": "Pwd123!"}
    await client.post(REGISTER, json=payload)

    response = await client.post(REGISTER, json=payload)

    assert response.status_code == 409
    assert response.json()["detail"] == "user with username alice already exists"


async def test_register_validates_input(client):
    response = await client.post(
        REGISTER, json={"username": "al", "email": "not-an-email", "password": "123"}
    )

    assert response.status_code == 422


async def test_login_sets_refresh_cookie(client):
    await client.post(
        REGISTER, json={"username": "alice", "email": "a@x.com", "password": "Pwd123!"}
    )

    response = await client.post(LOGIN, json={"username": "alice", "password": "Pwd123!"})

    assert response.status_code == 200
    body = response.json()
    assert body["access_token"]
    assert body["token_type"] == "bearer"
    assert "refresh_token" not in body
    cookie = response.headers["set-cookie"]
    assert cookie.startswith("refresh_token=")
    assert "HttpOnly" in cookie
    assert "samesite=strict" in cookie.lower()
    assert "Path=/api/v1/auth" in cookie


async def test_login_failures_are_indistinguishable(client):
    await client.post(
        REGISTER, json={"username": "alice", "email": "a@x.com", "password": "Pwd123!"}
    )

    wrong_password = await client.post(LOGIN, json={"username": "alice", "password": "wrong"})
    unknown_user = await client.post(LOGIN, json={"username": "nobody", "password": "wrong"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json()["detail"] == unknown_user.json()["detail"] == "Failed to login"


async def test_refresh_rotates_cookie(client):
    await register_and_login(client)
    first = client.cookies["refresh_token"]
    use_refresh_cookie(client, first)

    response = await client.post(REFRESH)

    assert response.status_code == 200
    assert response.json()["access_token"]
    second = response.cookies["refresh_token"]
    assert second != first

    use_refresh_cookie(client, first)
    replay = await client.post(REFRESH)
    assert replay.status_code == 401


async def test_refresh_without_cookie(client):
    response = await client.post(REFRESH)

    assert response.status_code == 401


async def test_logout_revokes_refresh_token(client):
    _, token = await register_and_login(client)
    refresh_value = client.cookies["refresh_token"]

    response = await client.post(LOGOUT, headers=auth_header(token))
    assert response.status_code == 204

    use_refresh_cookie(client, refresh_value)
    response = await client.post(REFRESH)
    assert response.status_code == 401


async def test_logout_requires_authentication(client):
    response = await client.post(LOGOUT)

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
