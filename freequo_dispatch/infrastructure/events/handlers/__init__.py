"""Event handlers subscribed at startup."""

from freequo_dispatch.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

__all__ = ["LoggingEventHandler"]
