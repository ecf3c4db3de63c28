"""Unit tests for the emailed-code challenge state machine.

Tests cover:
- Code expiry is strict (accepted only before code_expires_at)
- Reissue resets verified state and invalidates the old code
- Continuation token is single-use
- Password resets cannot be reused once used_at is set
"""

from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from blindgate.domain.entities import EmailVerification, PasswordReset
from blindgate.domain.enums import VerificationKind

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def make_verification(**overrides) -> EmailVerification:
    values = {
        "id": uuid7(),
        "email_hash": "a" * 64,
        "email_salt": "b" * 32,
        "kind": VerificationKind.GENERAL,
        "code": "123456",
        "code_expires_at": NOW + timedelta(minutes=10),
    }
    values.update(overrides)
    return EmailVerification(**values)


@pytest.mark.unit
class TestCodeExpiry:
    def test_code_accepted_before_expiry(self):
        record = make_verification()
        with freeze_time(NOW + timedelta(minutes=9, seconds=59)):
            assert record.is_code_valid("123456") is True

    def test_code_rejected_at_exact_expiry(self):
        record = make_verification()
        with freeze_time(NOW + timedelta(minutes=10)):
            assert record.is_code_valid("123456") is False

    def test_wrong_code_rejected(self):
        record = make_verification()
        with freeze_time(NOW):
            assert record.is_code_valid("654321") is False

    def test_verified_record_rejects_code(self):
        record = make_verification()
        with freeze_time(NOW):
            record.mark_verified("tok", NOW + timedelta(minutes=30))
            assert record.is_code_valid("123456") is False


@pytest.mark.unit
class TestReissue:
    def test_reissue_replaces_code_and_clears_token(self):
        record = make_verification()
        with freeze_time(NOW):
            record.mark_verified("tok", NOW + timedelta(minutes=30))
            record.reissue_code("999999", NOW + timedelta(minutes=10))

            assert record.verified is False
            assert record.continuation_token is None
            assert record.token_expires_at is None
            assert record.is_code_valid("123456") is False
            assert record.is_code_valid("999999") is True


@pytest.mark.unit
class TestContinuationToken:
    def test_token_usable_after_verification(self):
        record = make_verification()
        with freeze_time(NOW):
            record.mark_verified("tok", NOW + timedelta(minutes=30))
            assert record.has_usable_token() is True

    def test_token_unusable_at_expiry(self):
        record = make_verification()
        with freeze_time(NOW):
            record.mark_verified("tok", NOW + timedelta(minutes=30))
        with freeze_time(NOW + timedelta(minutes=30)):
            assert record.has_usable_token() is False

    def test_token_single_use(self):
        record = make_verification()
        with freeze_time(NOW):
            record.mark_verified("tok", NOW + timedelta(minutes=30))
            record.consume_token()
            assert record.has_usable_token() is False
            assert record.continuation_token is None


@pytest.mark.unit
class TestPasswordReset:
    def test_used_reset_rejects_token_and_code(self):
        reset = PasswordReset(
            id=uuid7(),
            email_hash="a" * 64,
            email_salt="b" * 32,
            code="123456",
            code_expires_at=NOW + timedelta(minutes=10),
        )
        with freeze_time(NOW):
            reset.mark_verified("tok", NOW + timedelta(minutes=30))
            reset.mark_used()

            assert reset.used_at == NOW
            assert reset.has_usable_token() is False
            assert reset.is_code_valid("123456") is False

    def test_reissue_clears_used_at(self):
        reset = PasswordReset(
            id=uuid7(),
            email_hash="a" * 64,
            email_salt="b" * 32,
            code="123456",
            code_expires_at=NOW + timedelta(minutes=10),
            used_at=NOW,
        )
        with freeze_time(NOW):
            reset.reissue_code("222222", NOW + timedelta(minutes=10))
            assert reset.used_at is None
            assert reset.is_code_valid("222222") is True
