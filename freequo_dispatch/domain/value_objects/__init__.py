"""Domain value objects.

Usage:
    from freequo_dispatch.domain.value_objects import PaymentResult, RenderedMessage
"""

from freequo_dispatch.domain.value_objects.application_notice import ApplicationNotice
from freequo_dispatch.domain.value_objects.channel_config import (
    CheckoutConfig,
    MailSenderConfig,
)
from freequo_dispatch.domain.value_objects.mail_receipt import MailReceipt
from freequo_dispatch.domain.value_objects.money import Money, validate_currency
from freequo_dispatch.domain.value_objects.payment_order import PaymentOrder
from freequo_dispatch.domain.value_objects.payment_result import (
    GatewayOutcome,
    PaymentResult,
)
from freequo_dispatch.domain.value_objects.rendered_message import RenderedMessage

__all__ = [
    "ApplicationNotice",
    "CheckoutConfig",
    "GatewayOutcome",
    "MailReceipt",
    "MailSenderConfig",
    "Money",
    "PaymentOrder",
    "PaymentResult",
    "RenderedMessage",
    "validate_currency",
]
