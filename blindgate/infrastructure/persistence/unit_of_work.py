"""SQLAlchemy unit of work.

Wraps the request-scoped AsyncSession so workflows commit once per step
without depending on SQLAlchemy.
"""

from sqlalchemy.ext.asyncio import AsyncSession


class SqlAlchemyUnitOfWork:
    """UnitOfWorkProtocol adapter over an AsyncSession.

    Example:
        >>> uow = SqlAlchemyUnitOfWork(session)
        >>> await user_repo.save(user)        # flushed
        >>> await session_repo.save(session)  # flushed
        >>> await uow.commit()                # both committed together
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
