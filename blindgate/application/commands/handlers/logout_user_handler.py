"""Logout user handler.

Deletes the caller's session row, which revokes its bearer token. Logging
out twice is not an error.
"""

from blindgate.application.commands.identity_commands import LogoutUser
from blindgate.core.errors import DomainError
from blindgate.core.result import Result, Success
from blindgate.domain.events import UserLogoutAttempted, UserLogoutSucceeded
from blindgate.domain.protocols import (
    EventBusProtocol,
    SessionRepository,
    UnitOfWorkProtocol,
)


class LogoutUserHandler:
    """Handler for LogoutUser."""

    def __init__(
        self,
        session_repo: SessionRepository,
        uow: UnitOfWorkProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._session_repo = session_repo
        self._uow = uow
        self._event_bus = event_bus

    async def handle(self, cmd: LogoutUser) -> Result[None, DomainError]:
        await self._event_bus.publish(
            UserLogoutAttempted(user_id=cmd.user_id, session_id=cmd.session_id)
        )

        deleted = await self._session_repo.delete(cmd.session_id)
        await self._uow.commit()

        await self._event_bus.publish(
            UserLogoutSucceeded(
                user_id=cmd.user_id, session_id=cmd.session_id, session_found=deleted
            )
        )
        return Success(value=None)
