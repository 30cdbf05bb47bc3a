"""Dispatch commands and their handlers."""

from freequo_dispatch.application.commands.dispatch_commands import (
    ConfirmPayment,
    CreatePaymentOrder,
    DispatchRecordCreated,
    ResolvePaymentOutcome,
)

__all__ = [
    "ConfirmPayment",
    "CreatePaymentOrder",
    "DispatchRecordCreated",
    "ResolvePaymentOutcome",
]
