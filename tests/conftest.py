"""Pytest configuration.

Environment defaults are set before any ``blindgate`` import so the cached
Settings point at an in-memory SQLite database. Fixtures provide:

- database / db_session: fresh schema per test (integration, api)
- seeded company data (KnownCorp with a COMPANY community)
- recording test doubles for the notifier and the event bus
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-characters")
os.environ.setdefault("BCRYPT_ROUNDS", "10")

from collections.abc import AsyncGenerator  # noqa: E402
from dataclasses import dataclass, field  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from blindgate.domain.events import DomainEvent  # noqa: E402
from blindgate.infrastructure.persistence.database import Database  # noqa: E402
from blindgate.infrastructure.persistence.models import (  # noqa: E402
    CommunityModel,
    CompanyDomainModel,
    CompanyModel,
)


# =============================================================================
# Test doubles
# =============================================================================


@dataclass
class RecordingEmailService:
    """Notifier double that keeps every code it was asked to send."""

    verification_codes: list[tuple[str, str, str | None]] = field(default_factory=list)
    reset_codes: list[tuple[str, str]] = field(default_factory=list)

    async def send_verification_code(
        self, to_email: str, code: str, company_name: str | None = None
    ) -> None:
        self.verification_codes.append((to_email, code, company_name))

    async def send_password_reset_code(self, to_email: str, code: str) -> None:
        self.reset_codes.append((to_email, code))

    def last_verification_code(self) -> str:
        return self.verification_codes[-1][1]

    def last_reset_code(self) -> str:
        return self.reset_codes[-1][1]


@dataclass
class RecordingEventBus:
    """Event bus double that keeps published events in order."""

    events: list[DomainEvent] = field(default_factory=list)

    def subscribe(self, event_type, handler) -> None:  # pragma: no cover
        pass

    async def publish(self, event: DomainEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: type) -> list[DomainEvent]:
        return [event for event in self.events if isinstance(event, event_type)]


@pytest.fixture
def email_service() -> RecordingEmailService:
    return RecordingEmailService()


@pytest.fixture
def event_bus() -> RecordingEventBus:
    return RecordingEventBus()


# =============================================================================
# Database fixtures
# =============================================================================


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Isolated in-memory database with the full schema."""
    db = Database("sqlite+aiosqlite://")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


@pytest_asyncio.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.get_session() as session:
        yield session


@dataclass(frozen=True)
class SeededCompany:
    company_id: UUID
    community_id: UUID
    name: str = "KnownCorp"
    slug: str = "knowncorp"
    domain: str = "knowncorp.com"


async def seed_company(session: AsyncSession) -> SeededCompany:
    """Insert KnownCorp, its domain and its COMPANY community."""
    company_id = uuid7()
    community_id = uuid7()
    session.add(
        CompanyModel(
            id=company_id,
            name="KnownCorp",
            slug="knowncorp",
            logo_url="https://cdn.example.com/knowncorp.png",
            is_verified=True,
        )
    )
    await session.flush()
    session.add(CompanyDomainModel(company_id=company_id, domain="knowncorp.com"))
    session.add(
        CommunityModel(
            id=community_id,
            name="KnownCorp",
            slug="knowncorp-community",
            type="COMPANY",
            company_id=company_id,
            member_count=0,
        )
    )
    await session.commit()
    return SeededCompany(company_id=company_id, community_id=community_id)


@pytest_asyncio.fixture
async def known_company(db_session: AsyncSession) -> SeededCompany:
    return await seed_company(db_session)
