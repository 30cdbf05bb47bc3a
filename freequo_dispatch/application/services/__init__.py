"""Application services."""

from freequo_dispatch.application.services.side_effect_executor import (
    GATEWAY_LOAD_FAILED,
    SIGNATURE_INVALID,
    NotificationExecutor,
    PaymentExecutor,
)
from freequo_dispatch.application.services.status_writer import (
    StatusWriter,
    StatusWriterError,
)

__all__ = [
    "GATEWAY_LOAD_FAILED",
    "SIGNATURE_INVALID",
    "NotificationExecutor",
    "PaymentExecutor",
    "StatusWriter",
    "StatusWriterError",
]
