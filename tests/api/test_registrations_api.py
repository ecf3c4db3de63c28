"""API tests for the registration endpoints.

- POST /api/v1/auth/company/verification-codes
- POST /api/v1/auth/company/verifications
- POST /api/v1/auth/company/registrations
- POST /api/v1/auth/general/verification-codes
- POST /api/v1/auth/general/verifications
- POST /api/v1/auth/general/registrations
"""

import re

import pytest

COMPANY = "/api/v1/auth/company"
GENERAL = "/api/v1/auth/general"
NICKNAME_PATTERN = re.compile(r"^[a-z]+_[a-z]+_\d{1,4}$")


async def general_token(client, email_service, email="bob@randommail.com") -> str:
    response = await client.post(f"{GENERAL}/verification-codes", json={"email": email})
    assert response.status_code == 200
    response = await client.post(
        f"{GENERAL}/verifications",
        json={"email": email, "code": email_service.last_verification_code()},
    )
    assert response.status_code == 200
    return response.json()["continuation_token"]


@pytest.mark.api
class TestCompanyRegistrationApi:
    async def test_company_flow_sets_cookie_and_authenticates(
        self, client, email_service, known_company
    ):
        requested = await client.post(
            f"{COMPANY}/verification-codes", json={"email": "alice@knowncorp.com"}
        )
        assert requested.status_code == 200
        body = requested.json()
        assert body["company"]["name"] == "KnownCorp"
        assert body["company"]["slug"] == "knowncorp"
        assert "expires_at" in body
        assert "code" not in body

        verified = await client.post(
            f"{COMPANY}/verifications",
            json={
                "email": "alice@knowncorp.com",
                "code": email_service.last_verification_code(),
            },
        )
        assert verified.status_code == 200

        created = await client.post(
            f"{COMPANY}/registrations",
            json={
                "continuation_token": verified.json()["continuation_token"],
                "password": "Password123",
                "confirm_password": "Password123",
            },
        )

        assert created.status_code == 201
        session = created.json()
        assert NICKNAME_PATTERN.match(session["user"]["nickname"])
        assert session["user"]["company_verified"] is True
        assert session["token_type"] == "bearer"

        set_cookie = created.headers["set-cookie"].lower()
        assert set_cookie.startswith("token=")
        assert "httponly" in set_cookie
        assert "samesite=lax" in set_cookie
        assert "max-age=604800" in set_cookie

        me = await client.get(
            "/api/v1/auth/me",
            headers={"Authorization": f"Bearer {session['token']}"},
        )
        assert me.status_code == 200
        assert me.json()["nickname"] == session["user"]["nickname"]
        assert me.json()["company"]["id"] == str(known_company.company_id)

    async def test_unregistered_domain(self, client, known_company):
        response = await client.post(
            f"{COMPANY}/verification-codes", json={"email": "bob@randommail.com"}
        )

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/problem+json")
        assert response.json()["code"] == "invalid_domain"

    async def test_malformed_email_is_validation_failure(self, client):
        response = await client.post(
            f"{COMPANY}/verification-codes", json={"email": "not-an-email"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "validation_failed"
        assert body["errors"][0]["field"] == "email"


@pytest.mark.api
class TestGeneralRegistrationApi:
    async def test_company_domain_redirected(self, client, known_company):
        response = await client.post(
            f"{GENERAL}/verification-codes", json={"email": "alice@knowncorp.com"}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "use_company_verification"

    async def test_wrong_code_then_taken_username(self, client, email_service):
        created = await client.post(
            f"{GENERAL}/registrations",
            json={
                "continuation_token": await general_token(
                    client, email_service, "carol@randommail.com"
                ),
                "username": "bob123",
                "password": "Password123",
                "confirm_password": "Password123",
            },
        )
        assert created.status_code == 201

        await client.post(
            f"{GENERAL}/verification-codes", json={"email": "bob@randommail.com"}
        )
        code = email_service.last_verification_code()
        wrong = await client.post(
            f"{GENERAL}/verifications",
            json={
                "email": "bob@randommail.com",
                "code": "000000" if code != "000000" else "111111",
            },
        )
        assert wrong.status_code == 400
        assert wrong.json()["code"] == "invalid_or_expired_code"

        verified = await client.post(
            f"{GENERAL}/verifications",
            json={"email": "bob@randommail.com", "code": code},
        )
        assert verified.status_code == 200

        taken = await client.post(
            f"{GENERAL}/registrations",
            json={
                "continuation_token": verified.json()["continuation_token"],
                "username": "bob123",
                "password": "Password123",
                "confirm_password": "Password123",
            },
        )
        assert taken.status_code == 409
        assert taken.json()["code"] == "username_taken"

    @pytest.mark.parametrize("username", ["abc", "a" * 21, "bob-123", "bob 123"])
    async def test_invalid_username_rejected(self, client, username):
        response = await client.post(
            f"{GENERAL}/registrations",
            json={
                "continuation_token": "x" * 64,
                "username": username,
                "password": "Password123",
                "confirm_password": "Password123",
            },
        )

        assert response.status_code == 400
        assert response.json()["code"] == "validation_failed"

    async def test_password_mismatch(self, client, email_service):
        response = await client.post(
            f"{GENERAL}/registrations",
            json={
                "continuation_token": await general_token(client, email_service),
                "username": "bob_builder",
                "password": "Password123",
                "confirm_password": "Password321",
            },
        )

        assert response.status_code == 400
        assert response.json()["code"] == "password_mismatch"
