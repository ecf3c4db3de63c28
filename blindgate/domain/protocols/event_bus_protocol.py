"""Event bus protocol (port) for domain events.

Implementations:
    - InMemoryEventBus: blindgate/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(UserLoginSucceeded, handler.handle_user_login_succeeded)
    >>> await event_bus.publish(UserLoginSucceeded(user_id=..., session_id=...))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from blindgate.domain.events.base_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async event handler: accepts one event, returns None."""


class EventBusProtocol(Protocol):
    """Publisher-subscriber mediator.

    Key Requirements:
        1. Fail-open: one handler failure must not prevent the others.
        2. Handlers are async and run concurrently (no ordering).
        3. Routing is by exact event type.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register ``handler`` for events of exactly ``event_type``."""
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Deliver ``event`` to every subscribed handler. Never raises."""
        ...
