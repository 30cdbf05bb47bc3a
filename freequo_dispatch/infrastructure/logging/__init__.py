"""Logging adapters."""

from freequo_dispatch.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
