"""Unit tests for the mail transports.

SesMailTransport runs against a botocore Stubber, so no request leaves the
process; StubMailTransport is exercised directly.
"""

from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import EndpointConnectionError
from botocore.stub import Stubber

from freequo_dispatch.core.enums import ErrorCode
from freequo_dispatch.core.result import Failure, Success
from freequo_dispatch.domain.value_objects import RenderedMessage
from freequo_dispatch.infrastructure.email import SesMailTransport, StubMailTransport


@pytest.fixture
def message() -> RenderedMessage:
    return RenderedMessage(
        sender="Freequo <no-reply@freequo.app>",
        recipient="asha@example.com",
        subject="✓ Application Confirmed: Logo Design",
        text="Hi Asha Rao,",
        html="<p>Hi Asha Rao,</p>",
    )


@pytest.fixture
def ses_client():
    return boto3.client(
        "ses",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.mark.unit
class TestSesMailTransport:
    """Test SES send and error classification."""

    async def test_send_returns_message_id(self, ses_client, message):
        # Arrange
        transport = SesMailTransport(region="us-east-1", client=ses_client)
        expected_params = {
            "Source": "Freequo <no-reply@freequo.app>",
            "Destination": {"ToAddresses": ["asha@example.com"]},
            "Message": {
                "Subject": {
                    "Charset": "UTF-8",
                    "Data": "✓ Application Confirmed: Logo Design",
                },
                "Body": {
                    "Html": {"Charset": "UTF-8", "Data": "<p>Hi Asha Rao,</p>"},
                    "Text": {"Charset": "UTF-8", "Data": "Hi Asha Rao,"},
                },
            },
        }

        # Act
        with Stubber(ses_client) as stubber:
            stubber.add_response("send_email", {"MessageId": "0100-abc"}, expected_params)
            result = await transport.send(message)
            stubber.assert_no_pending_responses()

        # Assert
        assert isinstance(result, Success)
        assert result.value.message_id == "0100-abc"

    @pytest.mark.parametrize(
        ("aws_code", "code", "is_transient"),
        [
            ("Throttling", ErrorCode.CHANNEL_UNAVAILABLE, True),
            ("ServiceUnavailable", ErrorCode.CHANNEL_UNAVAILABLE, True),
            ("AccessDenied", ErrorCode.CHANNEL_AUTHENTICATION_FAILED, False),
            ("MessageRejected", ErrorCode.CHANNEL_REJECTED, False),
            ("MailFromDomainNotVerifiedException", ErrorCode.CHANNEL_REJECTED, False),
        ],
    )
    async def test_client_error_classification(
        self, ses_client, message, aws_code, code, is_transient
    ):
        # Arrange
        transport = SesMailTransport(region="us-east-1", client=ses_client)

        # Act
        with Stubber(ses_client) as stubber:
            stubber.add_client_error(
                "send_email",
                service_error_code=aws_code,
                service_message="Request failed",
                http_status_code=400,
            )
            result = await transport.send(message)

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code is code
        assert result.error.is_transient is is_transient
        assert result.error.message == "Request failed"
        assert result.error.details == {"aws_error_code": aws_code}

    async def test_connection_error_is_transient(self, message):
        client = MagicMock()
        client.send_email.side_effect = EndpointConnectionError(
            endpoint_url="https://email.us-east-1.amazonaws.com"
        )
        transport = SesMailTransport(region="us-east-1", client=client)

        result = await transport.send(message)

        assert result.error.code is ErrorCode.CHANNEL_UNAVAILABLE
        assert result.error.is_transient is True

    async def test_missing_message_id_is_invalid_response(self, message):
        client = MagicMock()
        client.send_email.return_value = {}
        transport = SesMailTransport(region="us-east-1", client=client)

        result = await transport.send(message)

        assert result.error.code is ErrorCode.CHANNEL_INVALID_RESPONSE
        assert result.error.is_transient is False


@pytest.mark.unit
class TestStubMailTransport:
    """Test the in-process transport."""

    async def test_send_keeps_message_in_outbox(self, message):
        transport = StubMailTransport()

        result = await transport.send(message)

        assert isinstance(result, Success)
        assert result.value.message_id.startswith("<stub-")
        assert result.value.message_id.endswith("@freequo.local>")
        assert transport.outbox == [message]

    async def test_each_send_gets_distinct_id(self, message):
        transport = StubMailTransport()

        first = await transport.send(message)
        second = await transport.send(message)

        assert first.value.message_id != second.value.message_id
        assert len(transport.outbox) == 2
