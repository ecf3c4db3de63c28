"""API tests for session endpoints.

- POST   /api/v1/auth/sessions
- DELETE /api/v1/auth/sessions/current
- GET    /api/v1/auth/me
"""

import pytest
from uuid_extensions import uuid7

from blindgate.core.container import get_password_service
from blindgate.domain.entities import User
from blindgate.infrastructure.persistence.repositories import UserRepository

SESSIONS = "/api/v1/auth/sessions"


@pytest.fixture
async def account(db_session) -> User:
    user = User(
        id=uuid7(),
        nickname="frank_qa",
        password_hash=get_password_service().hash_password("Password123"),
    )
    await UserRepository(db_session).save(user)
    await db_session.commit()
    return user


@pytest.mark.api
class TestLogin:
    async def test_login_returns_token_and_cookie(self, client, account):
        response = await client.post(
            SESSIONS,
            json={"nickname": "Frank_QA", "password": "Password123"},
            headers={"User-Agent": "pytest-agent"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["user"]["id"] == str(account.id)
        assert body["token"]
        assert response.cookies.get("token") == body["token"]

    async def test_wrong_password(self, client, account):
        response = await client.post(
            SESSIONS, json={"nickname": "frank_qa", "password": "nope"}
        )

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["code"] == "invalid_credentials"

    async def test_unknown_nickname_matches_wrong_password(self, client, account):
        unknown = await client.post(
            SESSIONS, json={"nickname": "ghost", "password": "Password123"}
        )
        wrong = await client.post(
            SESSIONS, json={"nickname": "frank_qa", "password": "nope"}
        )

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json()["detail"] == wrong.json()["detail"]


@pytest.mark.api
class TestAuthenticatedRoutes:
    async def test_me_requires_authentication(self, client):
        response = await client.get("/api/v1/auth/me")

        assert response.status_code == 401
        assert response.json()["code"] == "unauthenticated"

    async def test_cookie_authenticates(self, client, account):
        await client.post(SESSIONS, json={"nickname": "frank_qa", "password": "Password123"})

        response = await client.get("/api/v1/auth/me")

        assert response.status_code == 200
        assert response.json()["nickname"] == "frank_qa"

    async def test_bearer_takes_precedence_over_cookie(self, client, account):
        await client.post(SESSIONS, json={"nickname": "frank_qa", "password": "Password123"})

        response = await client.get(
            "/api/v1/auth/me", headers={"Authorization": "Bearer not-a-valid-token"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "session_expired"

    async def test_logout_revokes_token_and_clears_cookie(self, client, account):
        login = await client.post(
            SESSIONS, json={"nickname": "frank_qa", "password": "Password123"}
        )
        headers = {"Authorization": f"Bearer {login.json()['token']}"}

        logout = await client.delete(f"{SESSIONS}/current", headers=headers)
        assert logout.status_code == 204
        assert "max-age=0" in logout.headers["set-cookie"].lower()

        after = await client.get("/api/v1/auth/me", headers=headers)
        assert after.status_code == 401
        assert after.json()["code"] == "session_expired"

    async def test_responses_carry_trace_id(self, client):
        response = await client.get(
            "/api/v1/auth/me", headers={"X-Trace-ID": "trace-from-caller"}
        )

        assert response.headers["X-Trace-ID"] == "trace-from-caller"
        assert response.json()["trace_id"] == "trace-from-caller"
