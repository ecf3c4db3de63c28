"""Integration tests for the company and general registration workflows.

Tests cover:
- Company path end to end (company info, generated nickname, community join)
- Idempotent code request (one record per email, old code stops verifying)
- Single-use continuation token
- One email, one account
- Domain exclusivity against the real company-domain table
- General path with wrong code and a taken username
- Password checks and the registration switch
"""

import re

import pytest
from sqlalchemy import func, select

from blindgate.application.commands.identity_commands import (
    CompleteCompanyRegistration,
    CompleteGeneralRegistration,
    RequestCompanyVerificationCode,
    RequestGeneralVerificationCode,
    VerifyCompanyEmail,
    VerifyGeneralEmail,
)
from blindgate.application.services import verification_records
from blindgate.application.services.policy_gate import (
    MIN_PASSWORD_LENGTH,
    REGISTRATION_ENABLED,
)
from blindgate.core.enums import ErrorCode
from blindgate.core.result import Failure, Success
from blindgate.domain.enums import UserRole
from blindgate.domain.events import UserRegistrationSucceeded
from blindgate.infrastructure.persistence.models import (
    CommunityMemberModel,
    CommunityModel,
    EmailVerificationModel,
)
from blindgate.infrastructure.persistence.repositories import (
    SettingsRepository,
    UserRepository,
)

NICKNAME_PATTERN = re.compile(r"^[a-z]+_[a-z]+_\d{1,4}$")


async def company_token(handlers, email_service, email="alice@knowncorp.com") -> str:
    request = await handlers.request_company_code()
    assert isinstance(
        await request.handle(RequestCompanyVerificationCode(email=email)), Success
    )
    verify = await handlers.verify_company_email()
    result = await verify.handle(
        VerifyCompanyEmail(email=email, code=email_service.last_verification_code())
    )
    assert isinstance(result, Success)
    return result.value.continuation_token


async def general_token(handlers, email_service, email="bob@randommail.com") -> str:
    request = await handlers.request_general_code()
    assert isinstance(
        await request.handle(RequestGeneralVerificationCode(email=email)), Success
    )
    verify = await handlers.verify_general_email()
    result = await verify.handle(
        VerifyGeneralEmail(email=email, code=email_service.last_verification_code())
    )
    assert isinstance(result, Success)
    return result.value.continuation_token


@pytest.mark.integration
class TestCompanyRegistration:
    async def test_full_company_flow(
        self, handlers, email_service, event_bus, known_company, db_session
    ):
        request = await handlers.request_company_code()
        requested = await request.handle(
            RequestCompanyVerificationCode(email="alice@knowncorp.com")
        )

        assert isinstance(requested, Success)
        assert requested.value.company.name == "KnownCorp"
        assert requested.value.company.id == known_company.company_id
        to_email, code, company_name = email_service.verification_codes[-1]
        assert (to_email, company_name) == ("alice@knowncorp.com", "KnownCorp")
        assert re.fullmatch(r"\d{6}", code)

        verify = await handlers.verify_company_email()
        verified = await verify.handle(
            VerifyCompanyEmail(email="alice@knowncorp.com", code=code)
        )
        assert isinstance(verified, Success)
        assert len(verified.value.continuation_token) == 64

        complete = await handlers.complete_company_registration()
        result = await complete.handle(
            CompleteCompanyRegistration(
                continuation_token=verified.value.continuation_token,
                password="Password123",
                confirm_password="Password123",
            )
        )

        assert isinstance(result, Success)
        user = result.value.user
        assert NICKNAME_PATTERN.match(user.nickname)
        assert user.company_verified is True
        assert user.company_id == known_company.company_id
        assert user.role == UserRole.USER
        assert result.value.cookie_max_age == 7 * 86400

        community = await db_session.get(CommunityModel, known_company.community_id)
        await db_session.refresh(community)
        assert community.member_count == 1
        members = await db_session.scalar(
            select(func.count()).select_from(CommunityMemberModel)
        )
        assert members == 1

        succeeded = event_bus.of_type(UserRegistrationSucceeded)[-1]
        assert succeeded.joined_community_id == known_company.community_id

        authenticator = await handlers.authenticator()
        identity = await authenticator.authenticate(result.value.token)
        assert isinstance(identity, Success)
        assert identity.value.id == user.id

    async def test_unknown_domain_rejected(self, handlers, known_company):
        request = await handlers.request_company_code()

        result = await request.handle(
            RequestCompanyVerificationCode(email="bob@randommail.com")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_DOMAIN

    async def test_wrong_company_email_does_not_verify(
        self, handlers, email_service, known_company
    ):
        request = await handlers.request_company_code()
        await request.handle(RequestCompanyVerificationCode(email="alice@knowncorp.com"))

        verify = await handlers.verify_company_email()
        result = await verify.handle(
            VerifyCompanyEmail(
                email="mallory@knowncorp.com",
                code=email_service.last_verification_code(),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_OR_EXPIRED_CODE


@pytest.mark.integration
class TestIdempotentCodeRequest:
    async def test_repeat_request_reuses_record(
        self, handlers, email_service, known_company, db_session, monkeypatch
    ):
        codes = iter(["111111", "222222"])
        monkeypatch.setattr(
            verification_records, "new_verification_code", lambda: next(codes)
        )
        request = await handlers.request_company_code()
        await request.handle(RequestCompanyVerificationCode(email="alice@knowncorp.com"))
        first_code = email_service.last_verification_code()
        await request.handle(RequestCompanyVerificationCode(email="ALICE@knowncorp.com"))
        second_code = email_service.last_verification_code()

        count = await db_session.scalar(
            select(func.count()).select_from(EmailVerificationModel)
        )
        assert count == 1
        assert (first_code, second_code) == ("111111", "222222")

        verify = await handlers.verify_company_email()
        stale = await verify.handle(
            VerifyCompanyEmail(email="alice@knowncorp.com", code=first_code)
        )
        assert isinstance(stale, Failure)
        fresh = await verify.handle(
            VerifyCompanyEmail(email="alice@knowncorp.com", code=second_code)
        )
        assert isinstance(fresh, Success)

    async def test_request_after_verification_restarts_flow(
        self, handlers, email_service, known_company
    ):
        token = await company_token(handlers, email_service)

        request = await handlers.request_company_code()
        await request.handle(RequestCompanyVerificationCode(email="alice@knowncorp.com"))

        complete = await handlers.complete_company_registration()
        result = await complete.handle(
            CompleteCompanyRegistration(
                continuation_token=token,
                password="Password123",
                confirm_password="Password123",
            )
        )
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_OR_EXPIRED_TOKEN


@pytest.mark.integration
class TestContinuationToken:
    async def test_token_is_single_use(self, handlers, email_service, known_company):
        token = await company_token(handlers, email_service)
        complete = await handlers.complete_company_registration()
        command = CompleteCompanyRegistration(
            continuation_token=token,
            password="Password123",
            confirm_password="Password123",
        )

        assert isinstance(await complete.handle(command), Success)
        again = await complete.handle(command)

        assert isinstance(again, Failure)
        assert again.error.code == ErrorCode.INVALID_OR_EXPIRED_TOKEN

    async def test_general_token_rejected_on_company_path(
        self, handlers, email_service
    ):
        token = await general_token(handlers, email_service)
        complete = await handlers.complete_company_registration()

        result = await complete.handle(
            CompleteCompanyRegistration(
                continuation_token=token,
                password="Password123",
                confirm_password="Password123",
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_OR_EXPIRED_TOKEN


@pytest.mark.integration
class TestOneEmailOneAccount:
    async def test_second_registration_with_same_email_conflicts(
        self, handlers, email_service
    ):
        first = await handlers.complete_general_registration()
        created = await first.handle(
            CompleteGeneralRegistration(
                continuation_token=await general_token(handlers, email_service),
                username="bob_first",
                password="Password123",
                confirm_password="Password123",
            )
        )
        assert isinstance(created, Success)

        second = await handlers.complete_general_registration()
        result = await second.handle(
            CompleteGeneralRegistration(
                continuation_token=await general_token(handlers, email_service),
                username="bob_second",
                password="Password123",
                confirm_password="Password123",
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_REGISTERED


@pytest.mark.integration
class TestGeneralRegistration:
    async def test_company_domain_rejected_on_general_path(
        self, handlers, known_company
    ):
        request = await handlers.request_general_code()

        result = await request.handle(
            RequestGeneralVerificationCode(email="alice@knowncorp.com")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USE_COMPANY_VERIFICATION

    async def test_wrong_code_then_taken_username(
        self, handlers, email_service, db_session
    ):
        existing = await handlers.complete_general_registration()
        assert isinstance(
            await existing.handle(
                CompleteGeneralRegistration(
                    continuation_token=await general_token(
                        handlers, email_service, "carol@randommail.com"
                    ),
                    username="bob123",
                    password="Password123",
                    confirm_password="Password123",
                )
            ),
            Success,
        )

        request = await handlers.request_general_code()
        await request.handle(RequestGeneralVerificationCode(email="bob@randommail.com"))
        code = email_service.last_verification_code()
        wrong = "000000" if code != "000000" else "111111"

        verify = await handlers.verify_general_email()
        failed = await verify.handle(
            VerifyGeneralEmail(email="bob@randommail.com", code=wrong)
        )
        assert isinstance(failed, Failure)
        assert failed.error.code == ErrorCode.INVALID_OR_EXPIRED_CODE

        verified = await verify.handle(
            VerifyGeneralEmail(email="bob@randommail.com", code=code)
        )
        assert isinstance(verified, Success)

        complete = await handlers.complete_general_registration()
        result = await complete.handle(
            CompleteGeneralRegistration(
                continuation_token=verified.value.continuation_token,
                username="Bob123",
                password="Password123",
                confirm_password="Password123",
            )
        )
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USERNAME_TAKEN

    async def test_username_stored_lowercase(self, handlers, email_service, db_session):
        complete = await handlers.complete_general_registration()
        result = await complete.handle(
            CompleteGeneralRegistration(
                continuation_token=await general_token(handlers, email_service),
                username="Bob_Builder",
                password="Password123",
                confirm_password="Password123",
            )
        )

        assert isinstance(result, Success)
        assert result.value.user.nickname == "bob_builder"
        assert result.value.user.company_verified is False
        stored = await UserRepository(db_session).find_by_nickname("bob_builder")
        assert stored is not None
        assert stored.email_hash is not None

    async def test_password_mismatch(self, handlers, email_service):
        complete = await handlers.complete_general_registration()
        result = await complete.handle(
            CompleteGeneralRegistration(
                continuation_token=await general_token(handlers, email_service),
                username="bob_builder",
                password="Password123",
                confirm_password="Password124",
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PASSWORD_MISMATCH

    async def test_password_below_policy_minimum(
        self, handlers, email_service, db_session
    ):
        await SettingsRepository(db_session).set_value(MIN_PASSWORD_LENGTH, 12)
        await db_session.commit()

        complete = await handlers.complete_general_registration()
        result = await complete.handle(
            CompleteGeneralRegistration(
                continuation_token=await general_token(handlers, email_service),
                username="bob_builder",
                password="Password123",
                confirm_password="Password123",
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.WEAK_PASSWORD

    async def test_registration_disabled(self, handlers, db_session):
        await SettingsRepository(db_session).set_value(REGISTRATION_ENABLED, False)
        await db_session.commit()

        request = await handlers.request_general_code()
        result = await request.handle(
            RequestGeneralVerificationCode(email="bob@randommail.com")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.REGISTRATION_DISABLED
