"""Domain event handlers."""

from blindgate.infrastructure.events.handlers.logging_event_handler import (
    LOGGED_EVENTS,
    LoggingEventHandler,
)

__all__ = ["LOGGED_EVENTS", "LoggingEventHandler"]
