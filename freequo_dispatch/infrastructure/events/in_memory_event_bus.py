"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary of handlers per event type.
Suitable for a single-process service: dispatch observability events never
leave the process that produced them.

Usage:
    >>> bus = InMemoryEventBus(logger=logger)
    >>> bus.subscribe(SideEffectDispatchFailed, handler.handle_dispatch_failed)
    >>> await bus.publish(SideEffectDispatchFailed(...))
"""

import asyncio
from collections import defaultdict

from freequo_dispatch.domain.events.base_event import DomainEvent
from freequo_dispatch.domain.protocols.event_bus_protocol import EventHandler
from freequo_dispatch.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Handlers for one event run concurrently via asyncio.gather. A handler
    that raises is logged at warning level; the other handlers still run and
    the publisher never sees the exception.

    Not thread-safe (single event loop).

    Attributes:
        _handlers: Event type to list of async handlers.
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
        """Register a handler for one event type (exact type match)."""
        self._handlers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers. Never raises."""
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

        for handler, result in zip(handlers, results, strict=True):
            if isinstance(result, Exception):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(handler, "__name__", repr(handler)),
                    error_type=type(result).__name__,
                    error_message=str(result),
                )
