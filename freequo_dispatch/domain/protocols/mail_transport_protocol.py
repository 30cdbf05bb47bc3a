"""MailTransportProtocol - Port for outbound email delivery.

Defines the single operation the notification channel needs. Infrastructure
provides SesMailTransport (Amazon SES via boto3) and StubMailTransport
(development and tests).
"""

from typing import Protocol

from freequo_dispatch.core.result import Result
from freequo_dispatch.domain.errors import MailDeliveryError
from freequo_dispatch.domain.value_objects import MailReceipt, RenderedMessage


class MailTransportProtocol(Protocol):
    """Mail transport protocol (port).

    Implementations perform exactly one delivery request per call, never
    retry, and return failures as data. Whether a failure is transient is
    the implementation's call (see MailDeliveryError.is_transient).

    Example:
        >>> match await transport.send(message):
        ...     case Success(value=receipt):
        ...         print(receipt.message_id)
        ...     case Failure(error=error):
        ...         print(error.is_transient)
    """

    async def send(
        self, message: RenderedMessage
    ) -> Result[MailReceipt, MailDeliveryError]:
        """Submit one message to the mail service.

        Args:
            message: Fully rendered message (sender, recipient, subject,
                text and HTML bodies).

        Returns:
            Success(MailReceipt) with the provider's message id, or
            Failure(MailDeliveryError).
        """
        ...
