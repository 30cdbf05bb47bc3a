"""Side-effect attempt domain entity.

One executor invocation against an external channel. The rendered content
lives only as long as the attempt; the status record keeps the outcome
metadata alone.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Uses Result types for state transitions
    - State machine: PENDING → SENT | FAILED | CANCELLED (terminal)

Usage:
    attempt = SideEffectAttempt(target="a@b.com", rendered_content=message)

    match attempt.mark_sent("<abc@mail>"):
        case Success(_):
            assert attempt.is_sent
        case Failure(error):
            ...
"""

from dataclasses import dataclass
from typing import Any

from freequo_dispatch.core.result import Failure, Result, Success
from freequo_dispatch.domain.enums import AttemptOutcome, FailureKind


class SideEffectAttemptError:
    """SideEffectAttempt transition error messages."""

    ALREADY_TERMINAL = "Attempt already reached a terminal outcome"
    REFERENCE_REQUIRED = "A sent attempt requires a provider reference"
    DETAIL_REQUIRED = "A failed attempt requires an error detail"


@dataclass(slots=True, kw_only=True)
class SideEffectAttempt:
    """One invocation of an external channel.

    Attributes:
        target: Destination address (email) or correlation id (order id).
        rendered_content: Built message or normalized result object.
        outcome: PENDING until exactly one terminal transition.
        provider_reference: External message/payment id on success.
        error_detail: Human-readable failure reason.
        failure_kind: Classification of a FAILED outcome.
        is_mock: True when the channel only simulated the side effect.
    """

    target: str
    rendered_content: Any = None
    outcome: AttemptOutcome = AttemptOutcome.PENDING
    provider_reference: str | None = None
    error_detail: str | None = None
    failure_kind: FailureKind | None = None
    is_mock: bool = False

    @classmethod
    def missing_field(cls, target: str, detail: str) -> "SideEffectAttempt":
        """Failed attempt for an event rejected before any channel call."""
        return cls(
            target=target,
            outcome=AttemptOutcome.FAILED,
            error_detail=detail,
            failure_kind=FailureKind.MISSING_REQUIRED_FIELD,
        )

    @property
    def is_terminal(self) -> bool:
        """Whether the attempt left PENDING."""
        return self.outcome is not AttemptOutcome.PENDING

    @property
    def is_sent(self) -> bool:
        """Whether the external action was acknowledged."""
        return self.outcome is AttemptOutcome.SENT

    @property
    def is_transient_failure(self) -> bool:
        """Whether the attempt failed in a way a retry may fix."""
        return (
            self.outcome is AttemptOutcome.FAILED
            and self.failure_kind is FailureKind.TRANSIENT
        )

    @property
    def should_record(self) -> bool:
        """Whether this outcome belongs on the source record."""
        if self.outcome is AttemptOutcome.SENT:
            return True
        if self.outcome is AttemptOutcome.FAILED:
            return self.failure_kind is not None and self.failure_kind.is_recorded
        return False

    def mark_sent(self, provider_reference: str | None) -> Result[None, str]:
        """Transition PENDING → SENT."""
        if self.is_terminal:
            return Failure(error=SideEffectAttemptError.ALREADY_TERMINAL)
        if not provider_reference:
            return Failure(error=SideEffectAttemptError.REFERENCE_REQUIRED)
        self.outcome = AttemptOutcome.SENT
        self.provider_reference = provider_reference
        return Success(value=None)

    def mark_failed(self, detail: str, kind: FailureKind) -> Result[None, str]:
        """Transition PENDING → FAILED."""
        if self.is_terminal:
            return Failure(error=SideEffectAttemptError.ALREADY_TERMINAL)
        if not detail:
            return Failure(error=SideEffectAttemptError.DETAIL_REQUIRED)
        self.outcome = AttemptOutcome.FAILED
        self.error_detail = detail
        self.failure_kind = kind
        return Success(value=None)

    def mark_cancelled(self, detail: str) -> Result[None, str]:
        """Transition PENDING → CANCELLED (user dismissed the confirmation)."""
        if self.is_terminal:
            return Failure(error=SideEffectAttemptError.ALREADY_TERMINAL)
        self.outcome = AttemptOutcome.CANCELLED
        self.error_detail = detail
        return Success(value=None)
