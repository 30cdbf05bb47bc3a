"""Outcome of one side-effect executor invocation."""

from enum import Enum


class AttemptOutcome(str, Enum):
    """State of a SideEffectAttempt.

    PENDING: still in flight.
    SENT: the external action was acknowledged.
    FAILED: the external action was rejected, timed out, or never started.
    CANCELLED: the user dismissed an interactive confirmation. Not a failure
        and never written to the status record.
    """

    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"
    CANCELLED = "cancelled"
