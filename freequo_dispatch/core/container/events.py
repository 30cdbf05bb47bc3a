"""Event bus factory.

Subscribes the logging handler to every dispatch event at creation.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from freequo_dispatch.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from freequo_dispatch.domain.protocols import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped, in-memory, fail-open)."""
    from freequo_dispatch.infrastructure.events import InMemoryEventBus
    from freequo_dispatch.infrastructure.events.handlers import LoggingEventHandler

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)
    LoggingEventHandler(logger=logger).register(event_bus)
    return event_bus
