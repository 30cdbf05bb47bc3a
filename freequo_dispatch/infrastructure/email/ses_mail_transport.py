"""AWS SES mail transport.

Sends one rendered message per call through SES ``SendEmail`` with HTML and
plain-text bodies. boto3 is synchronous, so the call runs in a worker
thread; the NotificationExecutor bounds the wait.

Error classification:
    - Throttling, service unavailability, connection and timeout errors:
      transient
    - Rejected messages, unverified senders, access denied and any other
      client error: permanent
"""

import asyncio
from typing import TYPE_CHECKING, Any

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from freequo_dispatch.core.enums import ErrorCode
from freequo_dispatch.core.result import Failure, Result, Success
from freequo_dispatch.domain.errors import MailDeliveryError
from freequo_dispatch.domain.value_objects import MailReceipt, RenderedMessage

if TYPE_CHECKING:
    from mypy_boto3_ses.client import SESClient

SERVICE_NAME = "ses"

TRANSIENT_ERROR_CODES = frozenset(
    {
        "Throttling",
        "ThrottlingException",
        "ServiceUnavailable",
        "InternalFailure",
        "RequestTimeout",
    }
)

AUTH_ERROR_CODES = frozenset(
    {
        "AccessDenied",
        "AccessDeniedException",
        "InvalidClientTokenId",
        "SignatureDoesNotMatch",
        "UnrecognizedClientException",
    }
)


class SesMailTransport:
    """Mail transport backed by AWS SES.

    Args:
        region: AWS region of the SES endpoint.
        client: Pre-built SES client (tests pass a stubbed one).
    """

    def __init__(self, *, region: str, client: "SESClient | None" = None) -> None:
        self._client = client or boto3.client("ses", region_name=region)
        self._logger = structlog.get_logger("ses_mail_transport")

    async def send(
        self, message: RenderedMessage
    ) -> Result[MailReceipt, MailDeliveryError]:
        """Submit one message to SES."""
        try:
            response = await asyncio.to_thread(self._send_email, message)
        except ClientError as e:
            return Failure(error=self._classify_client_error(e))
        except BotoCoreError as e:
            self._logger.warning(
                "ses_connection_error",
                recipient=message.recipient,
                error=str(e),
            )
            return Failure(
                error=MailDeliveryError(
                    code=ErrorCode.CHANNEL_UNAVAILABLE,
                    message=f"Failed to reach SES: {e}",
                    service_name=SERVICE_NAME,
                    is_transient=True,
                )
            )

        message_id = response.get("MessageId")
        if not message_id:
            return Failure(
                error=MailDeliveryError(
                    code=ErrorCode.CHANNEL_INVALID_RESPONSE,
                    message="SES accepted the message without a MessageId",
                    service_name=SERVICE_NAME,
                    is_transient=False,
                )
            )

        self._logger.info(
            "ses_message_sent",
            recipient=message.recipient,
            message_id=message_id,
        )
        return Success(value=MailReceipt(message_id=message_id))

    def _send_email(self, message: RenderedMessage) -> dict[str, Any]:
        return self._client.send_email(
            Source=message.sender,
            Destination={"ToAddresses": [message.recipient]},
            Message={
                "Subject": {"Charset": "UTF-8", "Data": message.subject},
                "Body": {
                    "Html": {"Charset": "UTF-8", "Data": message.html},
                    "Text": {"Charset": "UTF-8", "Data": message.text},
                },
            },
        )

    def _classify_client_error(self, error: ClientError) -> MailDeliveryError:
        details = error.response.get("Error", {})
        error_code = details.get("Code", "Unknown")
        provider_message = details.get("Message") or str(error)

        if error_code in TRANSIENT_ERROR_CODES:
            code, is_transient = ErrorCode.CHANNEL_UNAVAILABLE, True
        elif error_code in AUTH_ERROR_CODES:
            code, is_transient = ErrorCode.CHANNEL_AUTHENTICATION_FAILED, False
        else:
            code, is_transient = ErrorCode.CHANNEL_REJECTED, False

        self._logger.warning(
            "ses_client_error",
            aws_error_code=error_code,
            is_transient=is_transient,
        )
        return MailDeliveryError(
            code=code,
            message=provider_message,
            service_name=SERVICE_NAME,
            is_transient=is_transient,
            details={"aws_error_code": error_code},
        )
