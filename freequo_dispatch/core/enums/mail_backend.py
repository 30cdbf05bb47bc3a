"""Mail transport backends selectable through configuration."""

from enum import Enum


class MailBackend(str, Enum):
    """Which MailTransportProtocol adapter the container wires up.

    STUB logs messages and keeps them in memory (development/testing).
    SES sends through AWS Simple Email Service.
    """

    STUB = "stub"
    SES = "ses"
