"""Command handler factories.

Handlers hold no request state, so each is an application-scoped
singleton composed from the infrastructure singletons. Routes receive them
through FastAPI ``Depends``; tests override these functions.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from freequo_dispatch.core.config import get_settings
from freequo_dispatch.core.container.events import get_event_bus
from freequo_dispatch.core.container.infrastructure import (
    get_logger,
    get_mail_sender_config,
    get_mail_transport,
    get_payment_channel,
    get_payment_order_repository,
    get_status_writer,
)

if TYPE_CHECKING:
    from freequo_dispatch.application.commands.handlers import (
        ConfirmPaymentHandler,
        CreatePaymentOrderHandler,
        DispatchNotificationHandler,
        ResolvePaymentOutcomeHandler,
    )
    from freequo_dispatch.application.content import ContentBuilder
    from freequo_dispatch.application.sources import EventSource


@lru_cache()
def get_event_source() -> "EventSource":
    from freequo_dispatch.application.sources import EventSource

    return EventSource(watched_collection=get_settings().watched_collection)


@lru_cache()
def get_content_builder() -> "ContentBuilder":
    from freequo_dispatch.application.content import ContentBuilder

    return ContentBuilder(
        sender=get_mail_sender_config(),
        brand_name=get_settings().app_name,
    )


@lru_cache()
def get_dispatch_notification_handler() -> "DispatchNotificationHandler":
    from freequo_dispatch.application.commands.handlers import (
        DispatchNotificationHandler,
    )
    from freequo_dispatch.application.services import NotificationExecutor

    return DispatchNotificationHandler(
        event_source=get_event_source(),
        content_builder=get_content_builder(),
        executor=NotificationExecutor(
            transport=get_mail_transport(),
            config=get_mail_sender_config(),
            logger=get_logger(),
        ),
        status_writer=get_status_writer(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


@lru_cache()
def get_confirm_payment_handler() -> "ConfirmPaymentHandler":
    from freequo_dispatch.application.commands.handlers import ConfirmPaymentHandler
    from freequo_dispatch.application.services import PaymentExecutor

    return ConfirmPaymentHandler(
        event_source=get_event_source(),
        content_builder=get_content_builder(),
        executor=PaymentExecutor(channel=get_payment_channel(), logger=get_logger()),
        status_writer=get_status_writer(),
        order_repository=get_payment_order_repository(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


@lru_cache()
def get_create_payment_order_handler() -> "CreatePaymentOrderHandler":
    from freequo_dispatch.application.commands.handlers import (
        CreatePaymentOrderHandler,
    )

    return CreatePaymentOrderHandler(
        channel=get_payment_channel(),
        order_repository=get_payment_order_repository(),
        logger=get_logger(),
    )


@lru_cache()
def get_resolve_payment_outcome_handler() -> "ResolvePaymentOutcomeHandler":
    from freequo_dispatch.application.commands.handlers import (
        ResolvePaymentOutcomeHandler,
    )

    return ResolvePaymentOutcomeHandler(
        channel=get_payment_channel(),
        order_repository=get_payment_order_repository(),
        logger=get_logger(),
    )
