"""Stub mail transport for development and tests.

Logs each message instead of sending it and keeps it in ``outbox``.
"""

import structlog
from uuid_extensions import uuid7

from freequo_dispatch.core.result import Result, Success
from freequo_dispatch.domain.errors import MailDeliveryError
from freequo_dispatch.domain.value_objects import MailReceipt, RenderedMessage


class StubMailTransport:
    """Mail transport that never leaves the process.

    Attributes:
        outbox: Messages accepted so far, in order.
    """

    def __init__(self) -> None:
        self.outbox: list[RenderedMessage] = []
        self._logger = structlog.get_logger("stub_mail_transport")

    async def send(
        self, message: RenderedMessage
    ) -> Result[MailReceipt, MailDeliveryError]:
        message_id = f"<stub-{uuid7().hex}@freequo.local>"
        self.outbox.append(message)
        self._logger.info(
            "email_would_be_sent",
            sender=message.sender,
            recipient=message.recipient,
            subject=message.subject,
            message_id=message_id,
        )
        return Success(value=MailReceipt(message_id=message_id))
