"""Trigger event sources."""

from freequo_dispatch.application.sources.event_source import (
    EventSource,
    EventSourceError,
)

__all__ = ["EventSource", "EventSourceError"]
