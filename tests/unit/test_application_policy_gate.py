"""Unit tests for PolicyGate (settings store with Settings fallbacks)."""

from datetime import timedelta
from unittest.mock import AsyncMock, Mock

import pytest

from blindgate.application.services.policy_gate import (
    MIN_PASSWORD_LENGTH,
    REGISTRATION_ENABLED,
    SESSION_EXPIRE_DAYS,
    PolicyDefaults,
    PolicyGate,
)


def make_gate(stored: dict, **defaults) -> tuple[PolicyGate, Mock]:
    settings_repo = AsyncMock()
    settings_repo.get_value.side_effect = lambda key: stored.get(key)
    logger = Mock()
    return PolicyGate(settings_repo, PolicyDefaults(**defaults), logger), logger


@pytest.mark.unit
class TestRegistrationEnabled:
    async def test_missing_value_uses_default(self):
        gate, _ = make_gate({}, registration_enabled=False)
        assert await gate.registration_enabled() is False

    @pytest.mark.parametrize(
        ("stored", "expected"),
        [(True, True), (False, False), ("true", True), ("FALSE", False)],
    )
    async def test_stored_value_wins(self, stored, expected):
        gate, _ = make_gate({REGISTRATION_ENABLED: stored})
        assert await gate.registration_enabled() is expected

    async def test_unparseable_value_uses_default(self):
        gate, _ = make_gate({REGISTRATION_ENABLED: "maybe"})
        assert await gate.registration_enabled() is True


@pytest.mark.unit
class TestIntegerPolicies:
    async def test_min_password_length_from_store(self):
        gate, _ = make_gate({MIN_PASSWORD_LENGTH: 12})
        assert await gate.min_password_length() == 12

    async def test_digit_string_accepted(self):
        gate, _ = make_gate({MIN_PASSWORD_LENGTH: "10"})
        assert await gate.min_password_length() == 10

    @pytest.mark.parametrize("stored", [0, -3, "abc", True, 1.5])
    async def test_invalid_value_falls_back_and_logs(self, stored):
        gate, logger = make_gate({MIN_PASSWORD_LENGTH: stored}, min_password_length=8)

        assert await gate.min_password_length() == 8
        logger.warning.assert_called_once()
        assert logger.warning.call_args.args[0] == "policy_value_invalid"

    async def test_content_quota_defaults(self):
        gate, _ = make_gate({})
        assert await gate.max_posts_per_day() == 10
        assert await gate.max_comments_per_day() == 100


@pytest.mark.unit
class TestSessionExpireDays:
    async def test_within_token_lifetime_is_silent(self):
        gate, logger = make_gate({SESSION_EXPIRE_DAYS: 3})

        assert await gate.session_expire_days() == 3
        logger.warning.assert_not_called()

    async def test_longer_than_token_lifetime_warns(self):
        gate, logger = make_gate(
            {SESSION_EXPIRE_DAYS: 30}, token_lifetime=timedelta(days=7)
        )

        assert await gate.session_expire_days() == 30
        assert logger.warning.call_args.args[0] == "session_policy_exceeds_token_lifetime"
