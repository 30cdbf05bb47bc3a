"""Domain enums.

Usage:
    from freequo_dispatch.domain.enums import EventKind, AttemptOutcome
"""

from freequo_dispatch.domain.enums.attempt_outcome import AttemptOutcome
from freequo_dispatch.domain.enums.event_kind import EventKind
from freequo_dispatch.domain.enums.failure_kind import FailureKind
from freequo_dispatch.domain.enums.payment_status import GatewayStatus, PaymentStatus

__all__ = [
    "AttemptOutcome",
    "EventKind",
    "FailureKind",
    "GatewayStatus",
    "PaymentStatus",
]
