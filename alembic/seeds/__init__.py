"""Database seeding package.

Idempotent seeders that run automatically after ``alembic upgrade``.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from seeds.app_settings_seeder import seed_app_settings

logger = structlog.get_logger(__name__)


async def run_all_seeders(session: AsyncSession) -> None:
    """Run all database seeders. Safe to run on every migration.

    Args:
        session: Async database session.
    """
    logger.info("seeding_started")
    await seed_app_settings(session)
    logger.info("seeding_completed")


__all__ = ["run_all_seeders", "seed_app_settings"]
