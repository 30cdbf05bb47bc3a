"""Event bus protocol (port) for domain events.

The dispatch pipeline publishes observability events here; subscribers
(logging today) react without the pipeline knowing about them.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - InMemoryEventBus in infrastructure implements it
    - Container provides the application-scoped instance

Usage:
    event_bus = get_event_bus()
    event_bus.subscribe(SideEffectDispatchFailed, handler.handle_dispatch_failed)
    await event_bus.publish(SideEffectDispatchFailed(...))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from freequo_dispatch.domain.events.base_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async event handler: takes one event, returns None, never relied upon to raise."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. Fail-open: one handler failure must NOT prevent the others, and
           never reaches the publisher.
        2. Async handlers, executed concurrently with no ordering guarantee.
        3. Handlers receive only events of the exact type they registered for.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register an async handler for one event type.

        Args:
            event_type: Event class to handle (exact type match).
            handler: Async callable taking the event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Never raises. Publishing an event nobody subscribed to is a no-op.

        Args:
            event: Domain event to publish.
        """
        ...
