"""Policy settings seeder.

Inserts the default policy rows (registration switch, password length,
session lifetime, content quotas) when a key is missing. Existing values set
by administrators are never overwritten.
"""

import json

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

logger = structlog.get_logger(__name__)

DEFAULT_SETTINGS: dict[str, bool | int] = {
    "site.registrationEnabled": True,
    "security.minPasswordLength": 8,
    "security.sessionExpireDays": 7,
    "content.maxPostsPerDay": 10,
    "content.maxCommentsPerDay": 100,
}


async def seed_app_settings(session: AsyncSession) -> None:
    """Seed missing policy keys. Idempotent via key uniqueness check.

    Args:
        session: Async database session.
    """
    seeded_count = 0

    for key, value in DEFAULT_SETTINGS.items():
        result = await session.execute(
            text("SELECT 1 FROM app_settings WHERE key = :key LIMIT 1"),
            {"key": key},
        )
        if result.fetchone() is not None:
            logger.debug("app_setting_exists", key=key)
            continue

        await session.execute(
            text(
                "INSERT INTO app_settings (id, key, value) VALUES (:id, :key, :value)"
            ),
            {"id": uuid7(), "key": key, "value": json.dumps(value)},
        )
        seeded_count += 1

    logger.info("app_settings_seeded", seeded=seeded_count)
