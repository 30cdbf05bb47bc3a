"""Domain entities.

Usage:
    from freequo_dispatch.domain.entities import SideEffectAttempt, StatusRecord
"""

from freequo_dispatch.domain.entities.payment_handle import (
    PaymentHandle,
    PaymentHandleError,
)
from freequo_dispatch.domain.entities.side_effect_attempt import (
    SideEffectAttempt,
    SideEffectAttemptError,
)
from freequo_dispatch.domain.entities.status_record import StatusRecord

__all__ = [
    "PaymentHandle",
    "PaymentHandleError",
    "SideEffectAttempt",
    "SideEffectAttemptError",
    "StatusRecord",
]
