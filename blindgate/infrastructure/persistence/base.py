"""Base model and mixins for all database entities.

This module provides:
- UTCDateTime: timezone-aware DateTime that always loads as UTC
- BaseModel: Base class for ALL models (provides id, created_at)
- TimestampMixin: adds updated_at
- BaseMutableModel: base for mutable models (combines the above)

Domain entities never inherit from these; repositories map between them.

Architecture:
    BaseModel (id, created_at)
        ↑
        ├── BaseMutableModel (+ updated_at)
        │   ├── UserModel, EmailVerificationModel, PasswordResetModel, ...
        │
        └── SessionModel, CommunityMemberModel (no updated_at)
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator
from uuid_extensions import uuid7


class UTCDateTime(TypeDecorator[datetime]):
    """``DateTime(timezone=True)`` that never hands back a naive value.

    PostgreSQL returns aware datetimes already; SQLite (tests) stores naive
    text, so loaded values are tagged as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            return value.astimezone(UTC)
        return value

    def process_result_value(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
    - id: UUID primary key (UUIDv7 by default; repositories pass entity ids)
    - created_at: creation timestamp (UTC)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging)."""
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for mutable models that track updates.

    Repositories set ``updated_at`` explicitly from the entity; ``onupdate``
    covers bulk UPDATE statements that do not.
    """

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models (id, created_at, updated_at)."""

    __abstract__ = True
