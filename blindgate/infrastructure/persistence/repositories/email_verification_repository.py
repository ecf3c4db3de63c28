"""EmailVerificationRepository - SQLAlchemy implementation.

Records are keyed by salted hash; queries return candidate lists which the
workflow filters by recomputing each record's hash.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from blindgate.domain.entities.email_verification import EmailVerification
from blindgate.domain.enums import VerificationKind
from blindgate.infrastructure.persistence.models.email_verification import (
    EmailVerificationModel,
)


def _to_entity(model: EmailVerificationModel) -> EmailVerification:
    return EmailVerification(
        id=model.id,
        email_hash=model.email_hash,
        email_salt=model.email_salt,
        kind=VerificationKind(model.kind),
        company_id=model.company_id,
        code=model.code,
        code_expires_at=model.code_expires_at,
        verified=model.verified,
        continuation_token=model.continuation_token,
        token_expires_at=model.token_expires_at,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class EmailVerificationRepository:
    """SQLAlchemy implementation of EmailVerificationRepository protocol.

    Example:
        >>> repo = EmailVerificationRepository(session)
        >>> candidates = await repo.list_pending_with_code(
        ...     VerificationKind.GENERAL, None, "123456"
        ... )
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _scoped(
        self, kind: VerificationKind, company_id: UUID | None
    ) -> Select[tuple[EmailVerificationModel]]:
        stmt = select(EmailVerificationModel).where(
            EmailVerificationModel.kind == kind.value
        )
        if company_id is None:
            return stmt.where(EmailVerificationModel.company_id.is_(None))
        return stmt.where(EmailVerificationModel.company_id == company_id)

    async def list_in_scope(
        self,
        kind: VerificationKind,
        company_id: UUID | None,
    ) -> list[EmailVerification]:
        stmt = self._scoped(kind, company_id).order_by(
            EmailVerificationModel.created_at.asc(), EmailVerificationModel.id.asc()
        )
        result = await self.session.execute(stmt)
        return [_to_entity(model) for model in result.scalars().all()]

    async def list_pending_with_code(
        self,
        kind: VerificationKind,
        company_id: UUID | None,
        code: str,
    ) -> list[EmailVerification]:
        now = datetime.now(UTC)
        stmt = (
            self._scoped(kind, company_id)
            .where(
                EmailVerificationModel.code == code,
                EmailVerificationModel.verified.is_(False),
                EmailVerificationModel.code_expires_at > now,
            )
            .order_by(
                EmailVerificationModel.created_at.asc(), EmailVerificationModel.id.asc()
            )
        )
        result = await self.session.execute(stmt)
        return [_to_entity(model) for model in result.scalars().all()]

    async def find_by_continuation_token(self, token: str) -> EmailVerification | None:
        stmt = select(EmailVerificationModel).where(
            EmailVerificationModel.continuation_token == token
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return _to_entity(model)

    async def save(self, verification: EmailVerification) -> None:
        self.session.add(
            EmailVerificationModel(
                id=verification.id,
                email_hash=verification.email_hash,
                email_salt=verification.email_salt,
                kind=verification.kind.value,
                company_id=verification.company_id,
                code=verification.code,
                code_expires_at=verification.code_expires_at,
                verified=verification.verified,
                continuation_token=verification.continuation_token,
                token_expires_at=verification.token_expires_at,
                created_at=verification.created_at,
                updated_at=verification.updated_at,
            )
        )
        await self.session.flush()

    async def update(self, verification: EmailVerification) -> None:
        """Persist mutable fields.

        Raises:
            NoResultFound: If the record doesn't exist.
        """
        stmt = select(EmailVerificationModel).where(
            EmailVerificationModel.id == verification.id
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.code = verification.code
        model.code_expires_at = verification.code_expires_at
        model.verified = verification.verified
        model.continuation_token = verification.continuation_token
        model.token_expires_at = verification.token_expires_at
        model.updated_at = verification.updated_at

        await self.session.flush()
