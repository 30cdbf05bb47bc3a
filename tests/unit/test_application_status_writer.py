"""Unit tests for StatusWriter (idempotency guard and outcome recorder)."""

from unittest.mock import AsyncMock

import pytest

from freequo_dispatch.application.errors import StatusWriteFailure
from freequo_dispatch.application.services import StatusWriter, StatusWriterError
from freequo_dispatch.domain.entities import SideEffectAttempt, StatusRecord
from freequo_dispatch.domain.enums import EventKind, FailureKind

KIND = EventKind.RECORD_CREATED


@pytest.fixture
def repository() -> AsyncMock:
    repo = AsyncMock()
    repo.find_status.return_value = StatusRecord()
    repo.mark_sent.return_value = True
    repo.mark_failed.return_value = True
    return repo


@pytest.fixture
def writer(repository, mock_logger) -> StatusWriter:
    return StatusWriter(repository=repository, logger=mock_logger)


def _sent(reference: str = "<m-1@ses>", *, is_mock: bool = False) -> SideEffectAttempt:
    attempt = SideEffectAttempt(target="asha@example.com", is_mock=is_mock)
    attempt.mark_sent(reference)
    return attempt


def _failed(kind: FailureKind, detail: str = "Rejected") -> SideEffectAttempt:
    attempt = SideEffectAttempt(target="asha@example.com")
    attempt.mark_failed(detail, kind)
    return attempt


@pytest.mark.unit
class TestAlreadySent:
    """Test the advisory pre-check."""

    async def test_not_sent(self, writer):
        assert await writer.already_sent("app-1", KIND) is False

    async def test_sent(self, writer, repository):
        repository.find_status.return_value = StatusRecord(side_effect_sent=True)

        assert await writer.already_sent("app-1", KIND) is True

    async def test_missing_record_raises(self, writer, repository):
        repository.find_status.return_value = None

        with pytest.raises(StatusWriteFailure) as exc_info:
            await writer.already_sent("app-404", KIND)

        assert exc_info.value.record_id == "app-404"
        assert exc_info.value.reason == StatusWriterError.RECORD_NOT_FOUND

    async def test_store_error_raises(self, writer, repository, mock_logger):
        repository.find_status.side_effect = ConnectionError("db down")

        with pytest.raises(StatusWriteFailure):
            await writer.already_sent("app-1", KIND)

        mock_logger.critical.assert_called_once()


@pytest.mark.unit
class TestRecord:
    """Test conditional outcome writes."""

    async def test_sent_attempt_marks_sent(self, writer, repository):
        # Act
        changed = await writer.record("app-1", KIND, _sent(is_mock=True))

        # Assert
        assert changed is True
        repository.mark_sent.assert_awaited_once()
        args, kwargs = repository.mark_sent.call_args
        assert args == ("app-1", KIND)
        assert kwargs["reference"] == "<m-1@ses>"
        assert kwargs["simulated"] is True
        assert kwargs["sent_at"].tzinfo is not None
        repository.mark_failed.assert_not_awaited()

    @pytest.mark.parametrize(
        "kind", [FailureKind.PERMANENT, FailureKind.MISSING_REQUIRED_FIELD]
    )
    async def test_recordable_failure_marks_failed(self, writer, repository, kind):
        changed = await writer.record("app-1", KIND, _failed(kind, "Address rejected"))

        assert changed is True
        kwargs = repository.mark_failed.call_args.kwargs
        assert kwargs["error"] == "Address rejected"
        repository.mark_sent.assert_not_awaited()

    async def test_transient_failure_is_not_written(self, writer, repository):
        changed = await writer.record("app-1", KIND, _failed(FailureKind.TRANSIENT))

        assert changed is False
        repository.mark_sent.assert_not_awaited()
        repository.mark_failed.assert_not_awaited()

    async def test_cancelled_attempt_is_not_written(self, writer, repository):
        attempt = SideEffectAttempt(target="order_1")
        attempt.mark_cancelled("Payment was cancelled before completion")

        changed = await writer.record("order_1", EventKind.PAYMENT_RESOLVED, attempt)

        assert changed is False
        repository.mark_failed.assert_not_awaited()

    async def test_write_on_sent_record_is_suppressed(
        self, writer, repository, mock_logger
    ):
        # Arrange
        repository.mark_failed.return_value = False
        repository.find_status.return_value = StatusRecord(side_effect_sent=True)

        # Act
        changed = await writer.record("app-1", KIND, _failed(FailureKind.PERMANENT))

        # Assert
        assert changed is False
        mock_logger.info.assert_called_with(
            "status_write_suppressed",
            record_id="app-1",
            kind=KIND.value,
            outcome="failed",
        )

    async def test_write_on_missing_record_raises(self, writer, repository):
        repository.mark_sent.return_value = False
        repository.find_status.return_value = None

        with pytest.raises(StatusWriteFailure) as exc_info:
            await writer.record("app-404", KIND, _sent())

        assert exc_info.value.reason == StatusWriterError.RECORD_NOT_FOUND

    async def test_store_error_on_write_raises(self, writer, repository, mock_logger):
        # Arrange
        repository.mark_sent.side_effect = ConnectionError("db down")

        # Act / Assert
        with pytest.raises(StatusWriteFailure) as exc_info:
            await writer.record("app-1", KIND, _sent())

        assert "db down" in exc_info.value.reason
        mock_logger.critical.assert_called_once()
