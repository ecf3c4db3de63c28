"""Event bus dependency factory."""

from functools import lru_cache
from typing import TYPE_CHECKING

from blindgate.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from blindgate.domain.protocols import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Subscribes LoggingEventHandler to every identity event at creation.

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(UserLoginSucceeded(user_id=..., session_id=...))
    """
    from blindgate.infrastructure.events import InMemoryEventBus
    from blindgate.infrastructure.events.handlers import (
        LOGGED_EVENTS,
        LoggingEventHandler,
    )

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)

    logging_handler = LoggingEventHandler(logger=logger)
    for event_type in LOGGED_EVENTS:
        event_bus.subscribe(event_type, logging_handler.handle_event)

    return event_bus
