"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary registry (event type → handlers).
Handlers run concurrently with ``asyncio.gather``; a failing handler is logged
and never affects the publisher or the other handlers.

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(UserLoginSucceeded, handler.handle_user_login_succeeded)
    >>> await bus.publish(UserLoginSucceeded(user_id=user_id, session_id=session_id))
"""

import asyncio
from collections import defaultdict

from blindgate.domain.events.base_event import DomainEvent
from blindgate.domain.protocols.event_bus_protocol import EventHandler
from blindgate.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Thread Safety:
        NOT thread-safe (single-process async design).

    Attributes:
        _handlers: Event class → registered async handlers.
        _logger: Logger for handler failures.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register handler for exactly ``event_type`` (no inheritance matching)."""
        self._handlers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Flow:
            1. Look up handlers for type(event); none is a no-op
            2. Run all handlers with asyncio.gather(return_exceptions=True)
            3. Log each handler exception at warning level
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(handlers[idx], "__name__", repr(handlers[idx])),
                    error_type=type(result).__name__,
                    error_message=str(result),
                )
