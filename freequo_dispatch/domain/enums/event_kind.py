"""Kinds of triggering domain events."""

from enum import Enum


class EventKind(str, Enum):
    """Discriminator for trigger events.

    RECORD_CREATED: a job-application record was created.
    PAYMENT_RESOLVED: the payment channel reached a terminal state.
    """

    RECORD_CREATED = "record_created"
    PAYMENT_RESOLVED = "payment_resolved"
