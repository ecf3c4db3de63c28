"""Unit tests for the request-code handlers (company and general paths).

Tests cover:
- Domain exclusivity between the two paths
- Registration switch (REGISTRATION_DISABLED)
- Code is sent but never returned
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from blindgate.application.commands.handlers.request_company_verification_code_handler import (
    RequestCompanyVerificationCodeHandler,
)
from blindgate.application.commands.handlers.request_general_verification_code_handler import (
    RequestGeneralVerificationCodeHandler,
)
from blindgate.application.commands.identity_commands import (
    RequestCompanyVerificationCode,
    RequestGeneralVerificationCode,
)
from blindgate.application.services.verification_records import IssuedCode
from blindgate.core.enums import ErrorCode
from blindgate.core.result import Failure, Success
from blindgate.domain.entities import CompanyInfo, EmailVerification
from blindgate.domain.enums import VerificationKind
from blindgate.domain.events import VerificationCodeRequestFailed

KNOWN_CORP = CompanyInfo(id=uuid7(), name="KnownCorp", slug="knowncorp")


def make_issued(kind: VerificationKind, company_id=None) -> IssuedCode:
    record = EmailVerification(
        id=uuid7(),
        email_hash="h" * 64,
        email_salt="s" * 32,
        kind=kind,
        company_id=company_id,
        code="482913",
        code_expires_at=datetime.now(UTC) + timedelta(minutes=10),
    )
    return IssuedCode(record=record, code="482913", reused=False)


def make_deps(company: CompanyInfo | None, registration_enabled: bool = True):
    company_repo = AsyncMock()
    company_repo.find_by_domain.return_value = company
    records = AsyncMock()
    email_service = AsyncMock()
    policy = AsyncMock()
    policy.registration_enabled.return_value = registration_enabled
    return {
        "company_repo": company_repo,
        "records": records,
        "email_service": email_service,
        "policy": policy,
        "uow": AsyncMock(),
        "event_bus": AsyncMock(),
    }


@pytest.mark.unit
class TestCompanyPath:
    async def test_known_domain_sends_code_and_returns_company(self):
        deps = make_deps(KNOWN_CORP)
        deps["records"].issue_code.return_value = make_issued(
            VerificationKind.COMPANY, KNOWN_CORP.id
        )
        handler = RequestCompanyVerificationCodeHandler(**deps)

        result = await handler.handle(
            RequestCompanyVerificationCode(email="alice@knowncorp.com")
        )

        assert isinstance(result, Success)
        assert result.value.company == KNOWN_CORP
        assert not hasattr(result.value, "code")
        deps["company_repo"].find_by_domain.assert_awaited_once_with("knowncorp.com")
        deps["records"].issue_code.assert_awaited_once_with(
            "alice@knowncorp.com", VerificationKind.COMPANY, KNOWN_CORP.id
        )
        deps["email_service"].send_verification_code.assert_awaited_once_with(
            "alice@knowncorp.com", "482913", company_name="KnownCorp"
        )
        deps["uow"].commit.assert_awaited_once()

    async def test_unknown_domain_fails_invalid_domain(self):
        deps = make_deps(None)
        handler = RequestCompanyVerificationCodeHandler(**deps)

        result = await handler.handle(
            RequestCompanyVerificationCode(email="bob@randommail.com")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_DOMAIN
        deps["records"].issue_code.assert_not_awaited()
        deps["email_service"].send_verification_code.assert_not_awaited()
        failed = deps["event_bus"].publish.call_args_list[-1].args[0]
        assert isinstance(failed, VerificationCodeRequestFailed)
        assert failed.email_domain == "randommail.com"

    async def test_registration_disabled(self):
        deps = make_deps(KNOWN_CORP, registration_enabled=False)
        handler = RequestCompanyVerificationCodeHandler(**deps)

        result = await handler.handle(
            RequestCompanyVerificationCode(email="alice@knowncorp.com")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.REGISTRATION_DISABLED
        deps["company_repo"].find_by_domain.assert_not_awaited()


@pytest.mark.unit
class TestGeneralPath:
    async def test_unregistered_domain_sends_code(self):
        deps = make_deps(None)
        deps["records"].issue_code.return_value = make_issued(VerificationKind.GENERAL)
        handler = RequestGeneralVerificationCodeHandler(**deps)

        result = await handler.handle(
            RequestGeneralVerificationCode(email="bob@randommail.com")
        )

        assert isinstance(result, Success)
        assert result.value.company is None
        deps["records"].issue_code.assert_awaited_once_with(
            "bob@randommail.com", VerificationKind.GENERAL, None
        )
        deps["email_service"].send_verification_code.assert_awaited_once_with(
            "bob@randommail.com", "482913"
        )

    async def test_company_domain_redirects_to_company_path(self):
        deps = make_deps(KNOWN_CORP)
        handler = RequestGeneralVerificationCodeHandler(**deps)

        result = await handler.handle(
            RequestGeneralVerificationCode(email="alice@knowncorp.com")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USE_COMPANY_VERIFICATION
        deps["email_service"].send_verification_code.assert_not_awaited()

    async def test_registration_disabled(self):
        deps = make_deps(None, registration_enabled=False)
        handler = RequestGeneralVerificationCodeHandler(**deps)

        result = await handler.handle(
            RequestGeneralVerificationCode(email="bob@randommail.com")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.REGISTRATION_DISABLED
