"""Unit tests for Settings and duration parsing."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from blindgate.core.config import Settings, parse_duration
from blindgate.core.enums import Environment

SECRET = "config-test-secret-key-with-32-plus-chars"


def make_settings(**overrides) -> Settings:
    values = {"database_url": "sqlite+aiosqlite://", "secret_key": SECRET}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.mark.unit
class TestParseDuration:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("7d", timedelta(days=7)),
            ("24h", timedelta(hours=24)),
            ("30m", timedelta(minutes=30)),
            ("45s", timedelta(seconds=45)),
        ],
    )
    def test_units(self, value, expected):
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("value", ["", "7", "7w", "d7", "-1d"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_duration(value)


@pytest.mark.unit
class TestSettingsValidation:
    def test_defaults(self):
        settings = make_settings()

        assert settings.jwt_expires_delta == timedelta(days=7)
        assert settings.session_cookie_name == "token"
        assert settings.verification_code_expire_minutes == 10
        assert settings.continuation_token_expire_minutes == 30

    def test_short_secret_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(secret_key="too-short")

    def test_token_shorter_than_session_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(jwt_expires_in="24h", default_session_expire_days=7)

    def test_bad_duration_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(jwt_expires_in="forever")

    def test_bcrypt_rounds_range(self):
        with pytest.raises(ValidationError):
            make_settings(bcrypt_rounds=4)

    def test_secure_cookies_follow_environment(self):
        assert make_settings(environment=Environment.PRODUCTION).secure_cookies is True
        assert make_settings(environment=Environment.TESTING).secure_cookies is False
        assert (
            make_settings(environment=Environment.TESTING, cookie_secure=True).secure_cookies
            is True
        )

    def test_cors_origin_list(self):
        settings = make_settings(cors_origins="http://a.test, http://b.test ,")
        assert settings.cors_origin_list == ["http://a.test", "http://b.test"]
