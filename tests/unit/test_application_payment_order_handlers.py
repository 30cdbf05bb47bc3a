"""Unit tests for CreatePaymentOrderHandler and ResolvePaymentOutcomeHandler."""

import re
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from freequo_dispatch.application.commands import (
    CreatePaymentOrder,
    ResolvePaymentOutcome,
)
from freequo_dispatch.application.commands.handlers import (
    CreatePaymentOrderHandler,
    ResolvePaymentOutcomeHandler,
)
from freequo_dispatch.application.errors import ApplicationErrorCode
from freequo_dispatch.core.enums import ErrorCode
from freequo_dispatch.core.result import Failure, Success
from freequo_dispatch.domain.enums import GatewayStatus
from freequo_dispatch.domain.errors import PaymentChannelError
from freequo_dispatch.domain.value_objects import PaymentOrder
from freequo_dispatch.infrastructure.payments import PendingConfirmations, SimulatedChannel


def _create(**overrides) -> CreatePaymentOrder:
    fields = {
        "job_id": "job_42",
        "amount": Decimal("500"),
        "currency": "INR",
        "milestone": "Milestone 1",
        "job_title": "Logo Design",
        "freelancer_name": "Asha Rao",
    }
    fields.update(overrides)
    return CreatePaymentOrder(**fields)


@pytest.mark.unit
class TestCreatePaymentOrderHandler:
    """Test order creation."""

    async def test_simulated_order_is_created_and_saved(
        self, order_repository, mock_logger
    ):
        # Arrange
        handler = CreatePaymentOrderHandler(
            channel=SimulatedChannel(delay_seconds=0.01),
            order_repository=order_repository,
            logger=mock_logger,
        )

        # Act
        result = await handler.handle(_create())

        # Assert
        assert isinstance(result, Success)
        order = result.value
        assert re.fullmatch(r"mock_order_\d+_[0-9a-f]{8}", order.order_id)
        assert order.amount_minor == 50000
        assert order.job_id == "job_42"
        assert order.milestone == "Milestone 1"
        assert order.job_title == "Logo Design"
        order_repository.save.assert_awaited_once()
        call = order_repository.save.call_args
        assert call.args == (order,)
        assert call.kwargs["is_mock"] is True
        assert call.kwargs["receipt"].startswith("job_job_42_")

    async def test_channel_receives_minor_units_and_notes(
        self, order_repository, mock_logger
    ):
        # Arrange
        channel = MagicMock(is_simulated=False)
        channel.create_order = AsyncMock(
            return_value=Success(
                value=PaymentOrder(order_id="order_Nx1", amount_minor=12345, currency="INR")
            )
        )
        handler = CreatePaymentOrderHandler(
            channel=channel, order_repository=order_repository, logger=mock_logger
        )

        # Act
        await handler.handle(_create(amount=Decimal("123.45"), milestone=None))

        # Assert
        kwargs = channel.create_order.call_args.kwargs
        assert kwargs["amount_minor"] == 12345
        assert kwargs["currency"] == "INR"
        assert kwargs["notes"] == {"job_id": "job_42"}
        assert order_repository.save.call_args.kwargs["is_mock"] is False

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-10")])
    async def test_non_positive_amount_is_rejected(
        self, order_repository, mock_logger, amount
    ):
        channel = MagicMock()
        handler = CreatePaymentOrderHandler(
            channel=channel, order_repository=order_repository, logger=mock_logger
        )

        result = await handler.handle(_create(amount=amount))

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.message == "Amount must be positive"
        order_repository.save.assert_not_awaited()

    async def test_invalid_currency_is_rejected(self, order_repository, mock_logger):
        handler = CreatePaymentOrderHandler(
            channel=MagicMock(), order_repository=order_repository, logger=mock_logger
        )

        result = await handler.handle(_create(currency="RUPEES"))

        assert result.error.code is ApplicationErrorCode.COMMAND_VALIDATION_FAILED

    @pytest.mark.parametrize(
        ("is_transient", "expected_code"),
        [
            (True, ApplicationErrorCode.CHANNEL_UNAVAILABLE),
            (False, ApplicationErrorCode.COMMAND_EXECUTION_FAILED),
        ],
    )
    async def test_gateway_failure(
        self, order_repository, mock_logger, is_transient, expected_code
    ):
        # Arrange
        channel = MagicMock(is_simulated=False)
        channel.create_order = AsyncMock(
            return_value=Failure(
                error=PaymentChannelError(
                    code=ErrorCode.CHANNEL_UNAVAILABLE,
                    message="Razorpay unavailable",
                    service_name="razorpay",
                    is_transient=is_transient,
                )
            )
        )
        handler = CreatePaymentOrderHandler(
            channel=channel, order_repository=order_repository, logger=mock_logger
        )

        # Act
        result = await handler.handle(_create())

        # Assert
        assert result.error.code is expected_code
        assert result.error.message == "Error creating payment order"
        order_repository.save.assert_not_awaited()


@pytest.mark.unit
class TestResolvePaymentOutcomeHandler:
    """Test delivering the widget outcome."""

    async def test_first_outcome_is_delivered(self, order_repository, mock_logger):
        # Arrange
        channel = SimulatedChannel(delay_seconds=5)
        handler = ResolvePaymentOutcomeHandler(
            channel=channel, order_repository=order_repository, logger=mock_logger
        )

        # Act
        result = await handler.handle(
            ResolvePaymentOutcome(order_id="order_1", status=GatewayStatus.DISMISSED)
        )

        # Assert
        assert result == Success(value=None)
        opened = await channel.open_checkout(
            PaymentOrder(order_id="order_1", amount_minor=100)
        )
        outcome = await opened.value.wait()
        assert outcome.status is GatewayStatus.DISMISSED
        assert outcome.is_mock

    async def test_second_outcome_is_conflict(self, order_repository, mock_logger):
        handler = ResolvePaymentOutcomeHandler(
            channel=SimulatedChannel(delay_seconds=5),
            order_repository=order_repository,
            logger=mock_logger,
        )
        await handler.handle(
            ResolvePaymentOutcome(order_id="order_1", status=GatewayStatus.FAILED)
        )

        result = await handler.handle(
            ResolvePaymentOutcome(order_id="order_1", status=GatewayStatus.SUCCEEDED)
        )

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.CONFLICT
        assert result.error.domain_error.code is ErrorCode.PAYMENT_ALREADY_RESOLVED
        mock_logger.warning.assert_called_once()

    async def test_unknown_order_is_refused(self, order_repository, mock_logger):
        # Arrange
        order_repository.find_by_order_id.side_effect = None
        order_repository.find_by_order_id.return_value = None
        pending = PendingConfirmations()
        handler = ResolvePaymentOutcomeHandler(
            channel=SimulatedChannel(delay_seconds=5, pending=pending),
            order_repository=order_repository,
            logger=mock_logger,
        )

        # Act
        result = await handler.handle(
            ResolvePaymentOutcome(order_id="order_forged", status=GatewayStatus.FAILED)
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.NOT_FOUND
        assert "order_forged" not in pending
        order_repository.find_by_order_id.assert_awaited_once_with("order_forged")
