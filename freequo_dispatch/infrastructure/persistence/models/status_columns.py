"""Side-effect status columns shared by every source record table."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column


class SideEffectStatusMixin:
    """Outcome of the record's side effect.

    ``side_effect_sent`` is the idempotency flag: every status UPDATE is
    conditional on it still being false.
    """

    side_effect_sent: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )
    side_effect_sent_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    side_effect_reference: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )
    side_effect_error: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    side_effect_error_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    side_effect_simulated: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )
