"""Dependency injection container (composition root).

Usage:
    from freequo_dispatch.core.container import get_logger, get_event_bus
"""

from freequo_dispatch.core.container.events import get_event_bus
from freequo_dispatch.core.container.handlers import (
    get_confirm_payment_handler,
    get_content_builder,
    get_create_payment_order_handler,
    get_dispatch_notification_handler,
    get_event_source,
    get_resolve_payment_outcome_handler,
)
from freequo_dispatch.core.container.infrastructure import (
    get_checkout_config,
    get_database,
    get_logger,
    get_mail_sender_config,
    get_mail_transport,
    get_payment_channel,
    get_payment_order_repository,
    get_status_repository,
    get_status_writer,
)

__all__ = [
    "get_checkout_config",
    "get_confirm_payment_handler",
    "get_content_builder",
    "get_create_payment_order_handler",
    "get_database",
    "get_dispatch_notification_handler",
    "get_event_bus",
    "get_event_source",
    "get_logger",
    "get_mail_sender_config",
    "get_mail_transport",
    "get_payment_channel",
    "get_payment_order_repository",
    "get_resolve_payment_outcome_handler",
    "get_status_repository",
    "get_status_writer",
]
