"""Status writer: the idempotency guard and outcome recorder.

Two operations over the status columns of a source record:

- ``already_sent``: advisory pre-check run before any external call.
- ``record``: conditional write of a terminal attempt. The repository only
  updates rows whose side effect is not yet marked sent, so concurrent
  deliveries of the same event can never overwrite a recorded success.

Store failures raise StatusWriteFailure. That is the one outcome the
pipeline cannot swallow: the side effect may already have happened, and
only a redelivery can fix the record.
"""

from datetime import UTC, datetime

from freequo_dispatch.application.errors import StatusWriteFailure
from freequo_dispatch.domain.entities import SideEffectAttempt, StatusRecord
from freequo_dispatch.domain.enums import AttemptOutcome, EventKind
from freequo_dispatch.domain.protocols import (
    LoggerProtocol,
    SideEffectStatusRepository,
)


class StatusWriterError:
    """StatusWriter failure reasons."""

    RECORD_NOT_FOUND = "Source record not found"
    STORE_UNAVAILABLE = "Record store write failed"


class StatusWriter:
    """Records side-effect outcomes on source records, at most one success each."""

    def __init__(
        self,
        *,
        repository: SideEffectStatusRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._repository = repository
        self._logger = logger

    async def already_sent(self, record_id: str, kind: EventKind) -> bool:
        """Whether the record already carries a successful side effect.

        Raises:
            StatusWriteFailure: If the record does not exist or cannot be read.
        """
        try:
            status = await self._repository.find_status(record_id, kind)
        except Exception as e:
            self._logger.critical(
                "status_read_failed",
                error=e,
                record_id=record_id,
                kind=kind.value,
            )
            raise StatusWriteFailure(
                record_id, f"{StatusWriterError.STORE_UNAVAILABLE}: {e}"
            ) from e

        if status is None:
            self._logger.error(
                "status_record_missing", record_id=record_id, kind=kind.value
            )
            raise StatusWriteFailure(record_id, StatusWriterError.RECORD_NOT_FOUND)

        return status.side_effect_sent

    async def record(
        self, record_id: str, kind: EventKind, attempt: SideEffectAttempt
    ) -> bool:
        """Write a terminal attempt onto its source record.

        SENT sets the sent flag, time and reference and clears any earlier
        error. A recordable FAILED (missing field, permanent) sets the error
        and its time. Nothing else is written.

        Returns:
            True if the record changed, False if the write was skipped or
            suppressed because the record was already marked sent.

        Raises:
            StatusWriteFailure: If the record does not exist or the store fails.
        """
        if not attempt.should_record:
            return False

        now = datetime.now(UTC)
        status: StatusRecord | None = None
        try:
            if attempt.outcome is AttemptOutcome.SENT:
                written = await self._repository.mark_sent(
                    record_id,
                    kind,
                    reference=attempt.provider_reference,
                    sent_at=now,
                    simulated=attempt.is_mock,
                )
            else:
                written = await self._repository.mark_failed(
                    record_id,
                    kind,
                    error=attempt.error_detail or "Unknown error",
                    error_at=now,
                )
            if not written:
                status = await self._repository.find_status(record_id, kind)
        except Exception as e:
            self._logger.critical(
                "status_write_failed",
                error=e,
                record_id=record_id,
                kind=kind.value,
                outcome=attempt.outcome.value,
                reference=attempt.provider_reference,
            )
            raise StatusWriteFailure(
                record_id, f"{StatusWriterError.STORE_UNAVAILABLE}: {e}"
            ) from e

        if written:
            self._logger.info(
                "status_recorded",
                record_id=record_id,
                kind=kind.value,
                outcome=attempt.outcome.value,
            )
            return True

        if status is None:
            self._logger.critical(
                "status_write_failed",
                record_id=record_id,
                kind=kind.value,
                outcome=attempt.outcome.value,
                reason=StatusWriterError.RECORD_NOT_FOUND,
            )
            raise StatusWriteFailure(record_id, StatusWriterError.RECORD_NOT_FOUND)

        self._logger.info(
            "status_write_suppressed",
            record_id=record_id,
            kind=kind.value,
            outcome=attempt.outcome.value,
        )
        return False
