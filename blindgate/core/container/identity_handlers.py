"""Identity handler dependency factories (request-scoped).

Each factory receives the request's AsyncSession through
``Depends(get_db_session)``; FastAPI caches that dependency per request, so
every repository, the unit of work and the policy gate of one request share
one session and one transaction.

Usage:
    @router.post("/sessions")
    async def login(
        handler: LoginUserHandler = Depends(get_login_user_handler),
    ): ...
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blindgate.core.container.events import get_event_bus
from blindgate.core.container.infrastructure import (
    get_app_settings,
    get_db_session,
    get_email_hasher,
    get_email_service,
    get_logger,
    get_password_service,
    get_token_service,
)

if TYPE_CHECKING:
    from blindgate.application.commands.handlers.complete_company_registration_handler import (
        CompleteCompanyRegistrationHandler,
    )
    from blindgate.application.commands.handlers.complete_general_registration_handler import (
        CompleteGeneralRegistrationHandler,
    )
    from blindgate.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )
    from blindgate.application.commands.handlers.login_user_handler import (
        LoginUserHandler,
    )
    from blindgate.application.commands.handlers.logout_user_handler import (
        LogoutUserHandler,
    )
    from blindgate.application.commands.handlers.request_company_verification_code_handler import (
        RequestCompanyVerificationCodeHandler,
    )
    from blindgate.application.commands.handlers.request_general_verification_code_handler import (
        RequestGeneralVerificationCodeHandler,
    )
    from blindgate.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from blindgate.application.commands.handlers.verify_company_email_handler import (
        VerifyCompanyEmailHandler,
    )
    from blindgate.application.commands.handlers.verify_general_email_handler import (
        VerifyGeneralEmailHandler,
    )
    from blindgate.application.commands.handlers.verify_password_reset_code_handler import (
        VerifyPasswordResetCodeHandler,
    )
    from blindgate.application.queries.handlers.get_current_user_handler import (
        GetCurrentUserHandler,
    )
    from blindgate.application.services.account_registrar import AccountRegistrar
    from blindgate.application.services.policy_gate import PolicyGate
    from blindgate.application.services.session_authenticator import (
        SessionAuthenticator,
    )
    from blindgate.application.services.session_issuer import SessionIssuer
    from blindgate.application.services.verification_records import (
        EmailVerificationRecords,
    )


# ============================================================================
# Shared request-scoped building blocks
# ============================================================================


def _code_ttl() -> timedelta:
    return timedelta(minutes=get_app_settings().verification_code_expire_minutes)


def _token_ttl() -> timedelta:
    return timedelta(minutes=get_app_settings().continuation_token_expire_minutes)


def build_policy_gate(session: AsyncSession) -> "PolicyGate":
    """Policy gate over the request session, defaults from Settings."""
    from blindgate.application.services.policy_gate import PolicyDefaults, PolicyGate
    from blindgate.infrastructure.persistence.repositories import SettingsRepository

    settings = get_app_settings()
    defaults = PolicyDefaults(
        registration_enabled=settings.default_registration_enabled,
        min_password_length=settings.default_min_password_length,
        session_expire_days=settings.default_session_expire_days,
        max_posts_per_day=settings.default_max_posts_per_day,
        max_comments_per_day=settings.default_max_comments_per_day,
        token_lifetime=settings.jwt_expires_delta,
    )
    return PolicyGate(SettingsRepository(session=session), defaults, get_logger())


def _session_issuer(session: AsyncSession) -> "SessionIssuer":
    from blindgate.application.services.session_issuer import SessionIssuer
    from blindgate.infrastructure.persistence.repositories import SessionRepository

    return SessionIssuer(
        session_repo=SessionRepository(session=session),
        token_service=get_token_service(),
        policy=build_policy_gate(session),
    )


def _verification_records(session: AsyncSession) -> "EmailVerificationRecords":
    from blindgate.application.services.verification_records import (
        EmailVerificationRecords,
    )
    from blindgate.infrastructure.persistence.repositories import (
        EmailVerificationRepository,
    )

    return EmailVerificationRecords(
        EmailVerificationRepository(session=session),
        get_email_hasher(),
        code_ttl=_code_ttl(),
        token_ttl=_token_ttl(),
    )


def _registrar(session: AsyncSession) -> "AccountRegistrar":
    from blindgate.application.services.account_registrar import AccountRegistrar
    from blindgate.infrastructure.persistence.repositories import UserRepository

    return AccountRegistrar(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        session_issuer=_session_issuer(session),
    )


# ============================================================================
# Registration Handler Factories
# ============================================================================


async def get_request_company_code_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RequestCompanyVerificationCodeHandler":
    from blindgate.application.commands.handlers.request_company_verification_code_handler import (
        RequestCompanyVerificationCodeHandler,
    )
    from blindgate.infrastructure.persistence.repositories import CompanyRepository
    from blindgate.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return RequestCompanyVerificationCodeHandler(
        company_repo=CompanyRepository(session=session),
        records=_verification_records(session),
        email_service=get_email_service(),
        policy=build_policy_gate(session),
        uow=SqlAlchemyUnitOfWork(session),
        event_bus=get_event_bus(),
    )


async def get_verify_company_email_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "VerifyCompanyEmailHandler":
    from blindgate.application.commands.handlers.verify_company_email_handler import (
        VerifyCompanyEmailHandler,
    )
    from blindgate.infrastructure.persistence.repositories import CompanyRepository
    from blindgate.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return VerifyCompanyEmailHandler(
        company_repo=CompanyRepository(session=session),
        records=_verification_records(session),
        uow=SqlAlchemyUnitOfWork(session),
        event_bus=get_event_bus(),
    )


async def get_complete_company_registration_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CompleteCompanyRegistrationHandler":
    from blindgate.application.commands.handlers.complete_company_registration_handler import (
        CompleteCompanyRegistrationHandler,
    )
    from blindgate.infrastructure.persistence.repositories import (
        CommunityRepository,
        EmailVerificationRepository,
        UserRepository,
    )
    from blindgate.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return CompleteCompanyRegistrationHandler(
        records=_verification_records(session),
        verification_repo=EmailVerificationRepository(session=session),
        user_repo=UserRepository(session=session),
        community_repo=CommunityRepository(session=session),
        registrar=_registrar(session),
        policy=build_policy_gate(session),
        uow=SqlAlchemyUnitOfWork(session),
        event_bus=get_event_bus(),
        nickname_max_attempts=get_app_settings().nickname_max_attempts,
    )


async def get_request_general_code_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RequestGeneralVerificationCodeHandler":
    from blindgate.application.commands.handlers.request_general_verification_code_handler import (
        RequestGeneralVerificationCodeHandler,
    )
    from blindgate.infrastructure.persistence.repositories import CompanyRepository
    from blindgate.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return RequestGeneralVerificationCodeHandler(
        company_repo=CompanyRepository(session=session),
        records=_verification_records(session),
        email_service=get_email_service(),
        policy=build_policy_gate(session),
        uow=SqlAlchemyUnitOfWork(session),
        event_bus=get_event_bus(),
    )


async def get_verify_general_email_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "VerifyGeneralEmailHandler":
    from blindgate.application.commands.handlers.verify_general_email_handler import (
        VerifyGeneralEmailHandler,
    )
    from blindgate.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return VerifyGeneralEmailHandler(
        records=_verification_records(session),
        uow=SqlAlchemyUnitOfWork(session),
        event_bus=get_event_bus(),
    )


async def get_complete_general_registration_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CompleteGeneralRegistrationHandler":
    from blindgate.application.commands.handlers.complete_general_registration_handler import (
        CompleteGeneralRegistrationHandler,
    )
    from blindgate.infrastructure.persistence.repositories import (
        EmailVerificationRepository,
        UserRepository,
    )
    from blindgate.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return CompleteGeneralRegistrationHandler(
        records=_verification_records(session),
        verification_repo=EmailVerificationRepository(session=session),
        user_repo=UserRepository(session=session),
        registrar=_registrar(session),
        policy=build_policy_gate(session),
        uow=SqlAlchemyUnitOfWork(session),
        event_bus=get_event_bus(),
    )


# ============================================================================
# Password Reset Handler Factories
# ============================================================================


async def get_request_password_reset_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RequestPasswordResetHandler":
    from blindgate.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from blindgate.infrastructure.persistence.repositories import (
        PasswordResetRepository,
        UserRepository,
    )
    from blindgate.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return RequestPasswordResetHandler(
        user_repo=UserRepository(session=session),
        reset_repo=PasswordResetRepository(session=session),
        hasher=get_email_hasher(),
        email_service=get_email_service(),
        uow=SqlAlchemyUnitOfWork(session),
        event_bus=get_event_bus(),
        code_ttl=_code_ttl(),
    )


async def get_verify_password_reset_code_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "VerifyPasswordResetCodeHandler":
    from blindgate.application.commands.handlers.verify_password_reset_code_handler import (
        VerifyPasswordResetCodeHandler,
    )
    from blindgate.infrastructure.persistence.repositories import PasswordResetRepository
    from blindgate.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return VerifyPasswordResetCodeHandler(
        reset_repo=PasswordResetRepository(session=session),
        hasher=get_email_hasher(),
        uow=SqlAlchemyUnitOfWork(session),
        event_bus=get_event_bus(),
        token_ttl=_token_ttl(),
    )


async def get_confirm_password_reset_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ConfirmPasswordResetHandler":
    from blindgate.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )
    from blindgate.infrastructure.persistence.repositories import (
        PasswordResetRepository,
        SessionRepository,
        UserRepository,
    )
    from blindgate.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return ConfirmPasswordResetHandler(
        reset_repo=PasswordResetRepository(session=session),
        user_repo=UserRepository(session=session),
        session_repo=SessionRepository(session=session),
        password_service=get_password_service(),
        policy=build_policy_gate(session),
        uow=SqlAlchemyUnitOfWork(session),
        event_bus=get_event_bus(),
    )


# ============================================================================
# Session Handler Factories
# ============================================================================


async def get_login_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LoginUserHandler":
    from blindgate.application.commands.handlers.login_user_handler import (
        LoginUserHandler,
    )
    from blindgate.infrastructure.persistence.repositories import UserRepository
    from blindgate.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return LoginUserHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        session_issuer=_session_issuer(session),
        uow=SqlAlchemyUnitOfWork(session),
        event_bus=get_event_bus(),
    )


async def get_logout_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LogoutUserHandler":
    from blindgate.application.commands.handlers.logout_user_handler import (
        LogoutUserHandler,
    )
    from blindgate.infrastructure.persistence.repositories import SessionRepository
    from blindgate.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return LogoutUserHandler(
        session_repo=SessionRepository(session=session),
        uow=SqlAlchemyUnitOfWork(session),
        event_bus=get_event_bus(),
    )


async def get_current_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetCurrentUserHandler":
    from blindgate.application.queries.handlers.get_current_user_handler import (
        GetCurrentUserHandler,
    )
    from blindgate.infrastructure.persistence.repositories import (
        CompanyRepository,
        UserRepository,
    )

    return GetCurrentUserHandler(
        user_repo=UserRepository(session=session),
        company_repo=CompanyRepository(session=session),
    )


async def get_session_authenticator(
    session: AsyncSession = Depends(get_db_session),
) -> "SessionAuthenticator":
    """Authenticator used by the auth dependencies on every protected route."""
    from blindgate.application.services.session_authenticator import (
        SessionAuthenticator,
    )
    from blindgate.infrastructure.persistence.repositories import (
        SessionRepository,
        UserRepository,
    )
    from blindgate.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return SessionAuthenticator(
        token_service=get_token_service(),
        session_repo=SessionRepository(session=session),
        user_repo=UserRepository(session=session),
        uow=SqlAlchemyUnitOfWork(session),
        logger=get_logger(),
    )
