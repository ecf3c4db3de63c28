"""SettingsRepository - JSON key-value store backing the policy gate."""

import json
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blindgate.infrastructure.persistence.models.app_setting import AppSettingModel


class SettingsRepository:
    """SQLAlchemy implementation of SettingsRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_value(self, key: str) -> Any | None:
        """Return the decoded value, or None when missing or not valid JSON."""
        stmt = select(AppSettingModel.value).where(AppSettingModel.key == key)
        result = await self.session.execute(stmt)
        raw = result.scalar_one_or_none()
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return None

    async def set_value(self, key: str, value: Any) -> None:
        stmt = select(AppSettingModel).where(AppSettingModel.key == key)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        encoded = json.dumps(value)

        if model is None:
            self.session.add(AppSettingModel(key=key, value=encoded))
        else:
            model.value = encoded
            model.updated_at = datetime.now(UTC)

        await self.session.flush()
