"""Integration tests for session authentication, logout and current user.

Tests cover:
- A deleted session fails mandatory auth and yields no identity for optional auth
- last_used_at moves, expires_at does not
- Expired session rows and suspended users
- Logout is idempotent
"""

from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from blindgate.application.commands.identity_commands import LoginUser, LogoutUser
from blindgate.application.queries.user_queries import GetCurrentUser
from blindgate.core.container import get_password_service
from blindgate.core.enums import ErrorCode
from blindgate.core.result import Failure, Success
from blindgate.domain.entities import User
from blindgate.domain.enums import UserStatus
from blindgate.domain.events import UserLogoutSucceeded
from blindgate.infrastructure.persistence.repositories import (
    SessionRepository,
    UserRepository,
)


async def login(handlers, db_session, status: UserStatus = UserStatus.ACTIVE):
    user = User(
        id=uuid7(),
        nickname="erin_ops",
        password_hash=get_password_service().hash_password("Password123"),
    )
    await UserRepository(db_session).save(user)
    await db_session.commit()

    handler = await handlers.login()
    result = await handler.handle(LoginUser(nickname="erin_ops", password="Password123"))
    assert isinstance(result, Success)

    if status is not UserStatus.ACTIVE:
        user.status = status
        await UserRepository(db_session).update(user)
        await db_session.commit()
    return user, result.value


@pytest.mark.integration
class TestAuthenticate:
    async def test_valid_token_resolves_identity(self, handlers, db_session):
        user, issued = await login(handlers, db_session)
        authenticator = await handlers.authenticator()

        result = await authenticator.authenticate(issued.token)

        assert isinstance(result, Success)
        assert result.value.id == user.id
        assert result.value.nickname == "erin_ops"
        assert result.value.company_verified is False

    async def test_missing_token(self, handlers):
        authenticator = await handlers.authenticator()

        result = await authenticator.authenticate(None)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UNAUTHENTICATED

    async def test_deleted_session(self, handlers, db_session):
        _, issued = await login(handlers, db_session)
        identity = await (await handlers.authenticator()).authenticate(issued.token)
        await SessionRepository(db_session).delete(identity.value.session_id)
        await db_session.commit()

        authenticator = await handlers.authenticator()
        mandatory = await authenticator.authenticate(issued.token)
        optional = await authenticator.authenticate_optional(issued.token)

        assert isinstance(mandatory, Failure)
        assert mandatory.error.code == ErrorCode.SESSION_EXPIRED
        assert optional is None

    async def test_touch_does_not_extend_expiry(self, handlers, db_session):
        _, issued = await login(handlers, db_session)
        authenticator = await handlers.authenticator()
        later = datetime.now(UTC) + timedelta(hours=1)

        with freeze_time(later, real_asyncio=True):
            result = await authenticator.authenticate(issued.token)

        assert isinstance(result, Success)
        stored = await SessionRepository(db_session).find_by_id(result.value.session_id)
        assert stored.expires_at == issued.expires_at
        assert stored.last_used_at is not None
        assert abs(stored.last_used_at - later) < timedelta(seconds=1)

    async def test_expired_session_row(self, handlers, db_session):
        _, issued = await login(handlers, db_session)
        authenticator = await handlers.authenticator()

        with freeze_time(issued.expires_at, real_asyncio=True):
            result = await authenticator.authenticate(issued.token)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SESSION_EXPIRED

    async def test_suspended_user(self, handlers, db_session):
        _, issued = await login(handlers, db_session, UserStatus.SUSPENDED)
        authenticator = await handlers.authenticator()

        result = await authenticator.authenticate(issued.token)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ACCOUNT_SUSPENDED


@pytest.mark.integration
class TestLogoutAndCurrentUser:
    async def test_logout_is_idempotent(self, handlers, event_bus, db_session):
        user, issued = await login(handlers, db_session)
        identity = (await (await handlers.authenticator()).authenticate(issued.token)).value
        logout = await handlers.logout()
        command = LogoutUser(user_id=user.id, session_id=identity.session_id)

        assert isinstance(await logout.handle(command), Success)
        assert isinstance(await logout.handle(command), Success)

        found = [event.session_found for event in event_bus.of_type(UserLogoutSucceeded)]
        assert found == [True, False]

    async def test_current_user_profile(self, handlers, db_session):
        user, _ = await login(handlers, db_session)
        query = await handlers.current_user()

        result = await query.handle(GetCurrentUser(user_id=user.id))

        assert isinstance(result, Success)
        assert result.value.nickname == "erin_ops"
        assert result.value.status == UserStatus.ACTIVE
        assert result.value.last_active_at is not None
        assert result.value.company is None

    async def test_current_user_missing(self, handlers):
        query = await handlers.current_user()

        result = await query.handle(GetCurrentUser(user_id=uuid7()))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_NOT_FOUND
