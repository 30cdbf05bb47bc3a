"""Domain protocols (ports).

Usage:
    from freequo_dispatch.domain.protocols import MailTransportProtocol, LoggerProtocol
"""

from freequo_dispatch.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from freequo_dispatch.domain.protocols.logger_protocol import LoggerProtocol
from freequo_dispatch.domain.protocols.mail_transport_protocol import (
    MailTransportProtocol,
)
from freequo_dispatch.domain.protocols.payment_channel_protocol import (
    PaymentChannelProtocol,
)
from freequo_dispatch.domain.protocols.payment_order_repository import (
    PaymentOrderRepository,
)
from freequo_dispatch.domain.protocols.status_record_repository import (
    SideEffectStatusRepository,
)

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "MailTransportProtocol",
    "PaymentChannelProtocol",
    "PaymentOrderRepository",
    "SideEffectStatusRepository",
]
