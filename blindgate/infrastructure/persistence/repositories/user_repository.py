"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blindgate.domain.entities.user import User
from blindgate.domain.enums import UserRole, UserStatus
from blindgate.infrastructure.persistence.models.user import UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from the protocol (structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with db.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_nickname("brave_fox_0042")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        user_model = await self.session.get(UserModel, user_id)
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def find_by_nickname(self, nickname: str) -> User | None:
        """Find user by nickname (nicknames are stored lowercase)."""
        stmt = select(UserModel).where(UserModel.nickname == nickname.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def exists_by_nickname(self, nickname: str) -> bool:
        stmt = select(UserModel.id).where(UserModel.nickname == nickname.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_by_email_hash(self, email_hash: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email_hash == email_hash)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def list_active_with_email(self) -> list[User]:
        """List ACTIVE users with an email hash, oldest first."""
        stmt = (
            select(UserModel)
            .where(
                UserModel.status == UserStatus.ACTIVE.value,
                UserModel.email_hash.is_not(None),
            )
            .order_by(UserModel.created_at.asc(), UserModel.id.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, user: User) -> None:
        """Insert a new user.

        Raises:
            IntegrityError: If nickname or email_hash already exists.
        """
        self.session.add(self._to_model(user))
        await self.session.flush()

    async def update(self, user: User) -> None:
        """Update mutable fields of an existing user.

        Raises:
            NoResultFound: If user doesn't exist.
        """
        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one()

        user_model.nickname = user.nickname.lower()
        user_model.password_hash = user.password_hash
        user_model.company_id = user.company_id
        user_model.company_verified = user.company_verified
        user_model.role = user.role.value
        user_model.status = user.status.value
        user_model.last_active_at = user.last_active_at
        user_model.updated_at = user.updated_at

        await self.session.flush()

    def _to_domain(self, user_model: UserModel) -> User:
        return User(
            id=user_model.id,
            nickname=user_model.nickname,
            password_hash=user_model.password_hash,
            email_hash=user_model.email_hash,
            email_salt=user_model.email_salt,
            company_id=user_model.company_id,
            company_verified=user_model.company_verified,
            role=UserRole(user_model.role),
            status=UserStatus(user_model.status),
            last_active_at=user_model.last_active_at,
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )

    def _to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            nickname=user.nickname.lower(),
            password_hash=user.password_hash,
            email_hash=user.email_hash,
            email_salt=user.email_salt,
            company_id=user.company_id,
            company_verified=user.company_verified,
            role=user.role.value,
            status=user.status.value,
            last_active_at=user.last_active_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
