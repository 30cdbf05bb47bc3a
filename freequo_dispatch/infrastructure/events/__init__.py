"""Event bus adapters."""

from freequo_dispatch.infrastructure.events.in_memory_event_bus import (
    InMemoryEventBus,
)

__all__ = ["InMemoryEventBus"]
