"""Domain errors package.

Usage:
    from freequo_dispatch.domain.errors import MailDeliveryError, MissingRequiredFieldError
"""

from freequo_dispatch.domain.errors.dispatch_error import (
    ChannelError,
    MailDeliveryError,
    MissingRequiredFieldError,
    PaymentChannelError,
)

__all__ = [
    "ChannelError",
    "MailDeliveryError",
    "MissingRequiredFieldError",
    "PaymentChannelError",
]
