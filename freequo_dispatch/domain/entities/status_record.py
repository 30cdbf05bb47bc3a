"""Status record persisted on the originating record."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class StatusRecord:
    """Outcome metadata of the side effect for one source record.

    After a completed attempt exactly one of ``side_effect_sent`` or
    ``side_effect_error`` holds. Once sent, the record is never rewritten.

    Attributes:
        side_effect_sent: True once the side effect was acknowledged.
        side_effect_sent_at: When the success was recorded.
        side_effect_reference: Provider message id or payment id.
        side_effect_error: Last recorded failure reason.
        side_effect_error_at: When the failure was recorded.
        side_effect_simulated: True when the success came from a simulated channel.
    """

    side_effect_sent: bool = False
    side_effect_sent_at: datetime | None = None
    side_effect_reference: str | None = None
    side_effect_error: str | None = None
    side_effect_error_at: datetime | None = None
    side_effect_simulated: bool = False

    @property
    def is_in_flight(self) -> bool:
        """No outcome recorded yet."""
        return not self.side_effect_sent and self.side_effect_error is None
