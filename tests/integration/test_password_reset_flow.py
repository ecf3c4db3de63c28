"""Integration tests for the password reset workflow.

Tests cover:
- Reset revokes every session of the user
- Reset continuation token cannot be reused
- Unknown emails get the same answer and no code
- Suspended accounts cannot complete a reset
"""

import pytest
from uuid_extensions import uuid7

from blindgate.application.commands.identity_commands import (
    ConfirmPasswordReset,
    LoginUser,
    RequestPasswordReset,
    VerifyPasswordResetCode,
)
from blindgate.application.commands.handlers.request_password_reset_handler import (
    RESET_REQUEST_MESSAGE,
)
from blindgate.core.container import get_email_hasher, get_password_service
from blindgate.core.enums import ErrorCode
from blindgate.core.result import Failure, Success
from blindgate.domain.entities import User
from blindgate.domain.enums import UserStatus
from blindgate.domain.events import PasswordResetConfirmSucceeded
from blindgate.infrastructure.persistence.repositories import (
    SessionRepository,
    UserRepository,
)

EMAIL = "dana@randommail.com"


async def create_user(db_session, status: UserStatus = UserStatus.ACTIVE) -> User:
    hasher = get_email_hasher()
    salt = hasher.generate_salt()
    user = User(
        id=uuid7(),
        nickname="dana_dev",
        password_hash=get_password_service().hash_password("OldPassword1"),
        email_hash=hasher.hash_email(EMAIL, salt),
        email_salt=salt,
        status=status,
    )
    await UserRepository(db_session).save(user)
    await db_session.commit()
    return user


async def reset_token(handlers, email_service, email: str = EMAIL) -> str:
    request = await handlers.request_password_reset()
    await request.handle(RequestPasswordReset(email=email))
    verify = await handlers.verify_password_reset_code()
    result = await verify.handle(
        VerifyPasswordResetCode(email=email, code=email_service.last_reset_code())
    )
    assert isinstance(result, Success)
    return result.value.continuation_token


@pytest.mark.integration
class TestPasswordResetRevokesSessions:
    async def test_all_sessions_revoked(
        self, handlers, email_service, event_bus, db_session
    ):
        user = await create_user(db_session)
        login = await handlers.login()
        tokens = []
        for _ in range(2):
            result = await login.handle(
                LoginUser(nickname="dana_dev", password="OldPassword1")
            )
            assert isinstance(result, Success)
            tokens.append(result.value.token)

        confirm = await handlers.confirm_password_reset()
        result = await confirm.handle(
            ConfirmPasswordReset(
                continuation_token=await reset_token(handlers, email_service),
                new_password="NewPassword1",
                confirm_password="NewPassword1",
            )
        )

        assert isinstance(result, Success)
        assert await SessionRepository(db_session).find_by_user_id(user.id) == []
        assert event_bus.of_type(PasswordResetConfirmSucceeded)[-1].sessions_revoked == 2

        authenticator = await handlers.authenticator()
        for token in tokens:
            denied = await authenticator.authenticate(token)
            assert isinstance(denied, Failure)
            assert denied.error.code == ErrorCode.SESSION_EXPIRED

        old = await login.handle(LoginUser(nickname="dana_dev", password="OldPassword1"))
        new = await login.handle(LoginUser(nickname="dana_dev", password="NewPassword1"))
        assert isinstance(old, Failure)
        assert isinstance(new, Success)

    async def test_reset_token_single_use(self, handlers, email_service, db_session):
        await create_user(db_session)
        token = await reset_token(handlers, email_service)
        confirm = await handlers.confirm_password_reset()
        command = ConfirmPasswordReset(
            continuation_token=token,
            new_password="NewPassword1",
            confirm_password="NewPassword1",
        )

        assert isinstance(await confirm.handle(command), Success)
        again = await confirm.handle(command)

        assert isinstance(again, Failure)
        assert again.error.code == ErrorCode.INVALID_OR_EXPIRED_TOKEN


@pytest.mark.integration
class TestPasswordResetRequest:
    async def test_unknown_email_gets_same_answer_and_no_code(
        self, handlers, email_service, db_session
    ):
        await create_user(db_session)
        request = await handlers.request_password_reset()

        known = await request.handle(RequestPasswordReset(email=EMAIL))
        unknown = await request.handle(RequestPasswordReset(email="nobody@nowhere.com"))

        assert isinstance(known, Success)
        assert isinstance(unknown, Success)
        assert known.value.message == unknown.value.message == RESET_REQUEST_MESSAGE
        assert [to for to, _ in email_service.reset_codes] == [EMAIL]

    async def test_wrong_code_fails(self, handlers, email_service, db_session):
        await create_user(db_session)
        request = await handlers.request_password_reset()
        await request.handle(RequestPasswordReset(email=EMAIL))
        code = email_service.last_reset_code()

        verify = await handlers.verify_password_reset_code()
        result = await verify.handle(
            VerifyPasswordResetCode(
                email=EMAIL, code="000000" if code != "000000" else "111111"
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_OR_EXPIRED_CODE

    async def test_suspended_user_cannot_complete(
        self, handlers, email_service, db_session
    ):
        user = await create_user(db_session)
        token = await reset_token(handlers, email_service)

        user.status = UserStatus.SUSPENDED
        await UserRepository(db_session).update(user)
        await db_session.commit()

        confirm = await handlers.confirm_password_reset()
        result = await confirm.handle(
            ConfirmPasswordReset(
                continuation_token=token,
                new_password="NewPassword1",
                confirm_password="NewPassword1",
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ACCOUNT_SUSPENDED
