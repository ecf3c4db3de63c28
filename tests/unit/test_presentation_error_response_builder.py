"""Unit tests for RFC 9457 error rendering."""

import json
from unittest.mock import Mock

import pytest

from blindgate.core.enums import ErrorCode
from blindgate.domain.errors import IdentityErrors
from blindgate.presentation.routers.api.v1.errors import ErrorResponseBuilder
from blindgate.presentation.routers.api.v1.errors.problem_details import PROBLEM_JSON


def fake_request(path: str = "/api/v1/auth/sessions") -> Mock:
    request = Mock()
    request.url.path = path
    return request


@pytest.mark.unit
class TestStatusMapping:
    @pytest.mark.parametrize(
        ("code", "status_code"),
        [
            (ErrorCode.INVALID_DOMAIN, 400),
            (ErrorCode.INVALID_OR_EXPIRED_CODE, 400),
            (ErrorCode.PASSWORD_MISMATCH, 400),
            (ErrorCode.UNAUTHENTICATED, 401),
            (ErrorCode.SESSION_EXPIRED, 401),
            (ErrorCode.INVALID_CREDENTIALS, 401),
            (ErrorCode.ACCOUNT_SUSPENDED, 403),
            (ErrorCode.REGISTRATION_DISABLED, 403),
            (ErrorCode.FORBIDDEN, 403),
            (ErrorCode.USER_NOT_FOUND, 404),
            (ErrorCode.EMAIL_ALREADY_REGISTERED, 409),
            (ErrorCode.USERNAME_TAKEN, 409),
        ],
    )
    def test_status_for_code(self, code, status_code):
        assert ErrorResponseBuilder.status_code_for(code) == status_code


@pytest.mark.unit
class TestFromDomainError:
    def test_validation_error_lists_field(self):
        response = ErrorResponseBuilder.from_domain_error(
            IdentityErrors.INVALID_OR_EXPIRED_CODE,
            fake_request("/api/v1/auth/general/verifications"),
        )
        body = json.loads(response.body)

        assert response.status_code == 400
        assert response.media_type == PROBLEM_JSON
        assert body["code"] == "invalid_or_expired_code"
        assert body["instance"] == "/api/v1/auth/general/verifications"
        assert body["type"].endswith("/errors/invalid_or_expired_code")
        assert body["errors"] == [
            {
                "field": "code",
                "code": "invalid_or_expired_code",
                "message": "Verification code is invalid or expired.",
            }
        ]

    def test_unauthorized_sets_www_authenticate(self):
        response = ErrorResponseBuilder.from_domain_error(
            IdentityErrors.SESSION_EXPIRED, fake_request()
        )

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_conflict_has_no_field_errors(self):
        response = ErrorResponseBuilder.from_domain_error(
            IdentityErrors.USERNAME_TAKEN, fake_request()
        )
        body = json.loads(response.body)

        assert response.status_code == 409
        assert body["title"] == "Resource Conflict"
        assert "errors" not in body
