"""Application layer error types.

Two kinds live here:

- ApplicationError: a dataclass wrapping a domain error with handler
  context, returned inside Result types like any other expected failure.
- DispatchFailure and its subclasses: the only exceptions the pipeline
  raises. They must reach the trigger infrastructure so the trigger is
  retried instead of being marked done.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    DispatchFailure: Base exception for propagating pipeline failures
    TransientChannelFailure: Channel failure a retry may fix
    StatusWriteFailure: Outcome could not be recorded
"""

from dataclasses import dataclass
from enum import Enum

from freequo_dispatch.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Payment order not found",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    CHANNEL_UNAVAILABLE = "channel_unavailable"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code.
        message: Human-readable error message.
        domain_error: Original domain error, if any.
        details: Additional context as key-value pairs.
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None


class DispatchFailure(Exception):
    """Base for failures that propagate out of the dispatch pipeline.

    Attributes:
        record_id: Source record the dispatch was for.
        reason: Human-readable failure reason.
        domain_error: Underlying domain error, if the failure came from one.
    """

    def __init__(
        self,
        record_id: str,
        reason: str,
        *,
        domain_error: DomainError | None = None,
    ) -> None:
        super().__init__(reason)
        self.record_id = record_id
        self.reason = reason
        self.domain_error = domain_error


class TransientChannelFailure(DispatchFailure):
    """The external channel timed out or was unavailable.

    The record is left untouched so a redelivered trigger performs the side
    effect again.
    """


class StatusWriteFailure(DispatchFailure):
    """The outcome could not be written to the source record.

    If the side effect already happened, a redelivery may repeat it: the
    at-least-once trade-off.
    """
