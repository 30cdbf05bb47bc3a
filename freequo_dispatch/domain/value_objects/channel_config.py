"""Explicit configuration structs for the external channels.

Built once by the container from Settings and passed in at construction,
so executors and channels never read global configuration.
"""

from dataclasses import dataclass
from email.utils import formataddr


@dataclass(frozen=True, slots=True, kw_only=True)
class MailSenderConfig:
    """Sender identity and limits for the notification channel.

    Attributes:
        from_address: Sender email address.
        from_name: Sender display name.
        timeout_seconds: Upper bound for one transport round-trip.
        dashboard_url: Link rendered in notification bodies.
    """

    from_address: str
    from_name: str
    timeout_seconds: float
    dashboard_url: str

    @property
    def sender(self) -> str:
        """Formatted From header value."""
        return formataddr((self.from_name, self.from_address))


@dataclass(frozen=True, slots=True, kw_only=True)
class CheckoutConfig:
    """Presentation options for the interactive checkout.

    Attributes:
        brand_name: Merchant name shown in the widget.
        key_id: Public gateway key handed to the widget.
        theme_color: Widget accent color.
        logo_url: Widget logo.
        default_currency: Currency when an order does not name one.
    """

    brand_name: str
    key_id: str | None
    theme_color: str
    logo_url: str
    default_currency: str = "INR"
