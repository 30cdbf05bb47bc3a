"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (structlog console/JSON)
- Database (PostgreSQL / SQLite)
- Mail transport (stub / AWS SES)
- Payment channel (live Razorpay / simulated)
- Status writer

Settings are read here and nowhere else in the dispatch path; everything
below receives explicit config structs.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from freequo_dispatch.core.config import get_settings
from freequo_dispatch.core.enums import MailBackend, PaymentMode
from freequo_dispatch.domain.value_objects import CheckoutConfig, MailSenderConfig
from freequo_dispatch.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from freequo_dispatch.application.services import StatusWriter
    from freequo_dispatch.domain.protocols import (
        LoggerProtocol,
        MailTransportProtocol,
        PaymentChannelProtocol,
        PaymentOrderRepository,
        SideEffectStatusRepository,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped).

    Console renderer in development, JSON lines everywhere else.
    """
    from freequo_dispatch.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


@lru_cache()
def get_database() -> Database:
    """Get database singleton (app-scoped, owns the connection pool)."""
    settings = get_settings()
    return Database(database_url=settings.database_url, echo=settings.db_echo)


@lru_cache()
def get_mail_sender_config() -> MailSenderConfig:
    """Sender identity and limits for the notification channel."""
    settings = get_settings()
    return MailSenderConfig(
        from_address=settings.mail_from_address,
        from_name=settings.app_name,
        timeout_seconds=settings.mail_timeout_seconds,
        dashboard_url=settings.dashboard_url,
    )


@lru_cache()
def get_checkout_config() -> CheckoutConfig:
    """Presentation options for the checkout widget."""
    settings = get_settings()
    return CheckoutConfig(
        brand_name=settings.app_name,
        key_id=settings.razorpay_key_id,
        theme_color=settings.payment_theme_color,
        logo_url=settings.payment_logo_url,
        default_currency=settings.payment_currency,
    )


@lru_cache()
def get_mail_transport() -> "MailTransportProtocol":
    """Get mail transport singleton, chosen by MAIL_BACKEND.

    - 'stub': StubMailTransport (development/testing)
    - 'ses': SesMailTransport (production)
    """
    settings = get_settings()

    if settings.mail_backend is MailBackend.SES:
        from freequo_dispatch.infrastructure.email import SesMailTransport

        return SesMailTransport(region=settings.aws_region)

    from freequo_dispatch.infrastructure.email import StubMailTransport

    return StubMailTransport()


@lru_cache()
def get_payment_channel() -> "PaymentChannelProtocol":
    """Get payment channel singleton, chosen once by PAYMENT_MODE.

    - 'live': LiveChannel (Razorpay, client built on first use)
    - 'simulated': SimulatedChannel (fixed delay, mock ids)
    """
    from freequo_dispatch.infrastructure.payments import (
        LiveChannel,
        PendingConfirmations,
        RazorpayClient,
        SimulatedChannel,
    )

    settings = get_settings()
    pending = PendingConfirmations()

    if settings.payment_mode is PaymentMode.LIVE:

        def build_client() -> RazorpayClient:
            return RazorpayClient(
                key_id=settings.razorpay_key_id or "",
                key_secret=settings.razorpay_key_secret or "",
                base_url=settings.razorpay_api_base_url,
                timeout=settings.payment_api_timeout_seconds,
            )

        return LiveChannel(
            client_factory=build_client,
            config=get_checkout_config(),
            pending=pending,
        )

    return SimulatedChannel(
        delay_seconds=settings.simulated_payment_delay_seconds,
        pending=pending,
    )


@lru_cache()
def get_status_repository() -> "SideEffectStatusRepository":
    """Get side-effect status repository singleton."""
    from freequo_dispatch.infrastructure.persistence.repositories import (
        SideEffectStatusRepository as SqlSideEffectStatusRepository,
    )

    return SqlSideEffectStatusRepository(get_database())


@lru_cache()
def get_status_writer() -> "StatusWriter":
    """Get status writer singleton over the status repository."""
    from freequo_dispatch.application.services import StatusWriter

    return StatusWriter(
        repository=get_status_repository(),
        logger=get_logger(),
    )


@lru_cache()
def get_payment_order_repository() -> "PaymentOrderRepository":
    """Get payment order repository singleton."""
    from freequo_dispatch.infrastructure.persistence.repositories import (
        PaymentOrderRepository,
    )

    return PaymentOrderRepository(get_database())
