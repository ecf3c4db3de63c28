"""Logging event handler for identity workflow events.

Log Levels:
    - INFO: *Attempted and *Succeeded events
    - WARNING: *Failed events

Structured Fields:
    - event_id, occurred_at
    - every field of the event dataclass (ids, kind, reason); events never
      carry plaintext emails, codes or tokens, so all fields are safe to log

The log message is the snake_case event name
(``UserLoginFailed`` → ``user_login_failed``).
"""

import dataclasses
import re
from enum import Enum
from uuid import UUID

from blindgate.domain.events import (
    DomainEvent,
    EmailVerificationAttempted,
    EmailVerificationFailed,
    EmailVerificationSucceeded,
    PasswordResetConfirmAttempted,
    PasswordResetConfirmFailed,
    PasswordResetConfirmSucceeded,
    PasswordResetRequestAttempted,
    PasswordResetRequestSucceeded,
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
    UserLogoutAttempted,
    UserLogoutSucceeded,
    UserRegistrationAttempted,
    UserRegistrationFailed,
    UserRegistrationSucceeded,
    VerificationCodeRequestAttempted,
    VerificationCodeRequestFailed,
    VerificationCodeRequestSucceeded,
)
from blindgate.domain.protocols.logger_protocol import LoggerProtocol

LOGGED_EVENTS: tuple[type[DomainEvent], ...] = (
    VerificationCodeRequestAttempted,
    VerificationCodeRequestSucceeded,
    VerificationCodeRequestFailed,
    EmailVerificationAttempted,
    EmailVerificationSucceeded,
    EmailVerificationFailed,
    UserRegistrationAttempted,
    UserRegistrationSucceeded,
    UserRegistrationFailed,
    UserLoginAttempted,
    UserLoginSucceeded,
    UserLoginFailed,
    UserLogoutAttempted,
    UserLogoutSucceeded,
    PasswordResetRequestAttempted,
    PasswordResetRequestSucceeded,
    PasswordResetConfirmAttempted,
    PasswordResetConfirmSucceeded,
    PasswordResetConfirmFailed,
)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _event_name(event: DomainEvent) -> str:
    return _CAMEL_BOUNDARY.sub("_", type(event).__name__).lower()


def _loggable(value: object) -> object:
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "isoformat"):
        return value.isoformat()  # type: ignore[union-attr]
    return value


class LoggingEventHandler:
    """Writes one structured log line per published identity event.

    Example:
        >>> handler = LoggingEventHandler(logger=get_logger())
        >>> for event_type in LOGGED_EVENTS:
        ...     event_bus.subscribe(event_type, handler.handle_event)
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle_event(self, event: DomainEvent) -> None:
        fields = {
            field.name: _loggable(getattr(event, field.name))
            for field in dataclasses.fields(event)
        }
        name = _event_name(event)

        if name.endswith("_failed"):
            self._logger.warning(name, **fields)
        else:
            self._logger.info(name, **fields)
