"""Command handlers."""

from freequo_dispatch.application.commands.handlers.confirm_payment_handler import (
    ConfirmPaymentHandler,
)
from freequo_dispatch.application.commands.handlers.create_payment_order_handler import (
    CreatePaymentOrderHandler,
)
from freequo_dispatch.application.commands.handlers.dispatch_notification_handler import (
    DispatchNotificationHandler,
)
from freequo_dispatch.application.commands.handlers.resolve_payment_outcome_handler import (
    ResolvePaymentOutcomeHandler,
)

__all__ = [
    "ConfirmPaymentHandler",
    "CreatePaymentOrderHandler",
    "DispatchNotificationHandler",
    "ResolvePaymentOutcomeHandler",
]
