"""Policy Gate: externally configurable limits read from the settings store.

Every accessor reads the store on each call, so an administrator's change
applies to the next workflow step without a restart. A missing or
unparseable value falls back to the default from ``Settings``.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from blindgate.domain.protocols import LoggerProtocol, SettingsRepository

REGISTRATION_ENABLED = "site.registrationEnabled"
MIN_PASSWORD_LENGTH = "security.minPasswordLength"
SESSION_EXPIRE_DAYS = "security.sessionExpireDays"
MAX_POSTS_PER_DAY = "content.maxPostsPerDay"
MAX_COMMENTS_PER_DAY = "content.maxCommentsPerDay"


@dataclass(frozen=True, kw_only=True)
class PolicyDefaults:
    """Fallback values (built from Settings in the container)."""

    registration_enabled: bool = True
    min_password_length: int = 8
    session_expire_days: int = 7
    max_posts_per_day: int = 10
    max_comments_per_day: int = 100
    token_lifetime: timedelta = timedelta(days=7)


def _as_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    return None


def _as_positive_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        parsed = int(value.strip())
        return parsed if parsed > 0 else None
    return None


class PolicyGate:
    """Typed accessors over the key-value settings store.

    Example:
        >>> policy = PolicyGate(settings_repo, PolicyDefaults(), logger)
        >>> if not await policy.registration_enabled():
        ...     return Failure(error=IdentityErrors.REGISTRATION_DISABLED)
    """

    def __init__(
        self,
        settings_repo: SettingsRepository,
        defaults: PolicyDefaults,
        logger: LoggerProtocol,
    ) -> None:
        self._settings_repo = settings_repo
        self._defaults = defaults
        self._logger = logger

    async def registration_enabled(self) -> bool:
        value = _as_bool(await self._settings_repo.get_value(REGISTRATION_ENABLED))
        return self._defaults.registration_enabled if value is None else value

    async def min_password_length(self) -> int:
        return await self._int_setting(
            MIN_PASSWORD_LENGTH, self._defaults.min_password_length
        )

    async def session_expire_days(self) -> int:
        """Session lifetime in days.

        A stored value longer than the signed token lifetime is still
        honoured for the session row, but logged: such sessions outlive
        their token and end early with SESSION_EXPIRED.
        """
        days = await self._int_setting(
            SESSION_EXPIRE_DAYS, self._defaults.session_expire_days
        )
        if timedelta(days=days) > self._defaults.token_lifetime:
            self._logger.warning(
                "session_policy_exceeds_token_lifetime",
                session_expire_days=days,
                token_lifetime_seconds=int(self._defaults.token_lifetime.total_seconds()),
            )
        return days

    async def max_posts_per_day(self) -> int:
        return await self._int_setting(MAX_POSTS_PER_DAY, self._defaults.max_posts_per_day)

    async def max_comments_per_day(self) -> int:
        return await self._int_setting(
            MAX_COMMENTS_PER_DAY, self._defaults.max_comments_per_day
        )

    async def _int_setting(self, key: str, default: int) -> int:
        raw = await self._settings_repo.get_value(key)
        if raw is None:
            return default
        value = _as_positive_int(raw)
        if value is None:
            self._logger.warning("policy_value_invalid", key=key, fallback=default)
            return default
        return value
