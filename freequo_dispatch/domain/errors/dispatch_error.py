"""Dispatch error types for domain protocol contracts.

These errors are part of the MailTransportProtocol and
PaymentChannelProtocol contracts: they define the failure cases channel
implementations return inside Result types. They are data, never raised.

Classification:
    - MissingRequiredFieldError: event lacks a field the side effect needs.
      Recorded on the source record.
    - MailDeliveryError / PaymentChannelError with ``is_transient=True``:
      a retry may succeed. Never recorded; the pipeline raises instead.
    - Same errors with ``is_transient=False``: permanent. Recorded.

Usage:
    from freequo_dispatch.domain.errors import MailDeliveryError

    return Failure(error=MailDeliveryError(
        code=ErrorCode.CHANNEL_REJECTED,
        message="Recipient address rejected",
        service_name="mail",
        is_transient=False,
    ))
"""

from dataclasses import dataclass

from freequo_dispatch.core.errors import DomainError, ValidationError


@dataclass(frozen=True, slots=True, kw_only=True)
class MissingRequiredFieldError(ValidationError):
    """A field required to perform the side effect is absent or blank.

    Detected at the event boundary, before any external call.
    """


@dataclass(frozen=True, slots=True, kw_only=True)
class ChannelError(DomainError):
    """Base external channel error.

    Attributes:
        service_name: Channel that failed (mail, razorpay).
        is_transient: Whether the error is likely transient (True = retry).
        response_body: Raw response body for debugging, truncated.
    """

    service_name: str
    is_transient: bool = False
    response_body: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class MailDeliveryError(ChannelError):
    """Mail transport failed to accept the message.

    Transient when the transport timed out, was unreachable, rate limited
    or answered 5xx. Permanent for authentication failures and rejected
    requests.
    """


@dataclass(frozen=True, slots=True, kw_only=True)
class PaymentChannelError(ChannelError):
    """Payment channel could not open a checkout or create an order."""
