"""Domain events.

Trigger events start a dispatch; dispatch events report on it.

Usage:
    from freequo_dispatch.domain.events import RecordCreated, PaymentResolved
"""

from freequo_dispatch.domain.events.base_event import DomainEvent
from freequo_dispatch.domain.events.dispatch_events import (
    PaymentConfirmationCancelled,
    SideEffectDispatchAttempted,
    SideEffectDispatchFailed,
    SideEffectDispatchSucceeded,
    SideEffectDispatchSuppressed,
)
from freequo_dispatch.domain.events.trigger_events import (
    PaymentResolved,
    RecordCreated,
    TriggerEvent,
)

__all__ = [
    "DomainEvent",
    "PaymentConfirmationCancelled",
    "PaymentResolved",
    "RecordCreated",
    "SideEffectDispatchAttempted",
    "SideEffectDispatchFailed",
    "SideEffectDispatchSucceeded",
    "SideEffectDispatchSuppressed",
    "TriggerEvent",
]
