"""Acknowledgment returned by a mail transport."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class MailReceipt:
    """Provider acknowledgment of an accepted message.

    Attributes:
        message_id: Provider-assigned message reference.
    """

    message_id: str
