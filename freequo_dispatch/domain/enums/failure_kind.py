"""Classification of failed side-effect attempts."""

from enum import Enum


class FailureKind(str, Enum):
    """Why an attempt failed, which decides what happens next.

    MISSING_REQUIRED_FIELD: the event lacked an identifying field. Recorded.
    TRANSIENT: network error or timeout. Propagated so the trigger retries.
    PERMANENT: the channel rejected the request. Recorded, never retried.
    """

    MISSING_REQUIRED_FIELD = "missing_required_field"
    TRANSIENT = "transient"
    PERMANENT = "permanent"

    @property
    def is_recorded(self) -> bool:
        """Whether this failure is written onto the source record."""
        return self is not FailureKind.TRANSIENT
