"""SessionRepository - SQLAlchemy implementation of SessionRepository protocol.

Handles session persistence:
- creation at login and registration completion
- last-used refresh on every authenticated request
- single deletion (logout) and bulk deletion (password reset)
"""

from datetime import datetime
from typing import Any, cast
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blindgate.domain.entities.session import Session
from blindgate.infrastructure.persistence.models.session import SessionModel


class SessionRepository:
    """SQLAlchemy implementation of SessionRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, session: Session) -> None:
        self._session.add(self._to_model(session))
        await self._session.flush()

    async def find_by_id(self, session_id: UUID) -> Session | None:
        session_model = await self._session.get(SessionModel, session_id)

        if session_model is None:
            return None

        return self._to_domain(session_model)

    async def find_by_user_id(self, user_id: UUID) -> list[Session]:
        stmt = (
            select(SessionModel)
            .where(SessionModel.user_id == user_id)
            .order_by(SessionModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def update_last_used(self, session_id: UUID, used_at: datetime) -> None:
        stmt = (
            update(SessionModel)
            .where(SessionModel.id == session_id)
            .values(last_used_at=used_at)
        )
        await self._session.execute(stmt)
        await self._session.flush()

    async def delete(self, session_id: UUID) -> bool:
        """Delete a session (hard delete).

        Returns:
            True if deleted, False if not found.
        """
        stmt = delete(SessionModel).where(SessionModel.id == session_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return (cast(Any, result).rowcount or 0) > 0

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every session of a user (forced global logout).

        Returns:
            Number of sessions deleted.
        """
        stmt = delete(SessionModel).where(SessionModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return cast(Any, result).rowcount or 0

    def _to_domain(self, model: SessionModel) -> Session:
        return Session(
            id=model.id,
            user_id=model.user_id,
            token=model.token,
            user_agent=model.user_agent,
            ip_address=model.ip_address,
            expires_at=model.expires_at,
            last_used_at=model.last_used_at,
            created_at=model.created_at,
        )

    def _to_model(self, session: Session) -> SessionModel:
        return SessionModel(
            id=session.id,
            user_id=session.user_id,
            token=session.token,
            user_agent=session.user_agent,
            ip_address=session.ip_address,
            expires_at=session.expires_at,
            last_used_at=session.last_used_at,
            created_at=session.created_at,
        )
