"""SideEffectStatusRepository protocol.

Port for the status columns stored on the originating records. Every
write is conditional on the record not yet being marked sent, so a
successful status can never be overwritten, whatever the interleaving of
concurrent redeliveries.
"""

from datetime import datetime
from typing import Protocol

from freequo_dispatch.domain.entities import StatusRecord
from freequo_dispatch.domain.enums import EventKind


class SideEffectStatusRepository(Protocol):
    """Conditional status persistence for source records.

    Implementations raise infrastructure exceptions (SQLAlchemyError) on
    store failures; the StatusWriter turns them into StatusWriteFailure.
    """

    async def find_status(self, record_id: str, kind: EventKind) -> StatusRecord | None:
        """Load the status of a record.

        Returns:
            StatusRecord, or None when the record does not exist.
        """
        ...

    async def mark_sent(
        self,
        record_id: str,
        kind: EventKind,
        *,
        reference: str | None,
        sent_at: datetime,
        simulated: bool = False,
    ) -> bool:
        """Record a success and clear any earlier error.

        Returns:
            True if the row was updated, False if it was already sent or
            does not exist.
        """
        ...

    async def mark_failed(
        self,
        record_id: str,
        kind: EventKind,
        *,
        error: str,
        error_at: datetime,
    ) -> bool:
        """Record a failure reason on a record not yet sent.

        Returns:
            True if the row was updated, False if it was already sent or
            does not exist.
        """
        ...
