"""SettingsRepository protocol (port) - key-value policy store."""

from typing import Any, Protocol


class SettingsRepository(Protocol):
    """Key-value settings store (values are JSON)."""

    async def get_value(self, key: str) -> Any | None:
        """Return the decoded value for ``key``, or None when unset or unreadable."""
        ...

    async def set_value(self, key: str, value: Any) -> None:
        """Store ``value`` (JSON-encoded) under ``key``."""
        ...
