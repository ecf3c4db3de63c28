"""PasswordResetRepository - SQLAlchemy implementation."""

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blindgate.domain.entities.password_reset import PasswordReset
from blindgate.infrastructure.persistence.models.password_reset import (
    PasswordResetModel,
)


def _to_entity(model: PasswordResetModel) -> PasswordReset:
    return PasswordReset(
        id=model.id,
        email_hash=model.email_hash,
        email_salt=model.email_salt,
        code=model.code,
        code_expires_at=model.code_expires_at,
        verified=model.verified,
        continuation_token=model.continuation_token,
        token_expires_at=model.token_expires_at,
        used_at=model.used_at,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class PasswordResetRepository:
    """SQLAlchemy implementation of PasswordResetRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_email_hash(self, email_hash: str) -> PasswordReset | None:
        stmt = select(PasswordResetModel).where(
            PasswordResetModel.email_hash == email_hash
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_entity(model) if model is not None else None

    async def list_pending_with_code(self, code: str) -> list[PasswordReset]:
        """Unverified, unused, unexpired records carrying ``code``."""
        now = datetime.now(UTC)
        stmt = (
            select(PasswordResetModel)
            .where(
                PasswordResetModel.code == code,
                PasswordResetModel.verified.is_(False),
                PasswordResetModel.used_at.is_(None),
                PasswordResetModel.code_expires_at > now,
            )
            .order_by(PasswordResetModel.created_at.asc(), PasswordResetModel.id.asc())
        )
        result = await self.session.execute(stmt)
        return [_to_entity(model) for model in result.scalars().all()]

    async def find_by_continuation_token(self, token: str) -> PasswordReset | None:
        stmt = select(PasswordResetModel).where(
            PasswordResetModel.continuation_token == token
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_entity(model) if model is not None else None

    async def save(self, reset: PasswordReset) -> None:
        self.session.add(
            PasswordResetModel(
                id=reset.id,
                email_hash=reset.email_hash,
                email_salt=reset.email_salt,
                code=reset.code,
                code_expires_at=reset.code_expires_at,
                verified=reset.verified,
                continuation_token=reset.continuation_token,
                token_expires_at=reset.token_expires_at,
                used_at=reset.used_at,
                created_at=reset.created_at,
                updated_at=reset.updated_at,
            )
        )
        await self.session.flush()

    async def update(self, reset: PasswordReset) -> None:
        stmt = select(PasswordResetModel).where(PasswordResetModel.id == reset.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.code = reset.code
        model.code_expires_at = reset.code_expires_at
        model.verified = reset.verified
        model.continuation_token = reset.continuation_token
        model.token_expires_at = reset.token_expires_at
        model.used_at = reset.used_at
        model.updated_at = reset.updated_at

        await self.session.flush()
