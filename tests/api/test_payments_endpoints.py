"""API tests for payment endpoints.

Tests the complete HTTP request/response cycle:
- POST /api/v1/payments/orders (create order)
- GET /api/v1/payments/orders/{order_id} (order and confirmation status)
- POST /api/v1/payments/orders/{order_id}/confirmation (confirm payment)
- POST /api/v1/payments/orders/{order_id}/outcome (widget outcome)

Architecture:
- FastAPI TestClient with the real app and dependency overrides
- Real handlers over SimulatedChannel or a LiveChannel backed by
  httpx.MockTransport; repositories are mocked and know every order id
- Requests inside one TestClient block share an event loop, so an outcome
  posted before the confirmation reaches the pending handle
"""

import hashlib
import hmac
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from freequo_dispatch.application.commands.handlers import (
    ConfirmPaymentHandler,
    CreatePaymentOrderHandler,
    ResolvePaymentOutcomeHandler,
)
from freequo_dispatch.application.content import ContentBuilder
from freequo_dispatch.application.services import PaymentExecutor, StatusWriter
from freequo_dispatch.application.sources import EventSource
from freequo_dispatch.core.container import (
    get_confirm_payment_handler,
    get_create_payment_order_handler,
    get_payment_channel,
    get_payment_order_repository,
    get_resolve_payment_outcome_handler,
    get_status_repository,
)
from freequo_dispatch.domain.entities import StatusRecord
from freequo_dispatch.domain.value_objects import PaymentOrder
from freequo_dispatch.infrastructure.payments import (
    LiveChannel,
    RazorpayClient,
    SimulatedChannel,
)
from freequo_dispatch.main import app
from tests.conftest import payment_order_data

KEY_SECRET = "test_secret"
ORDERS_URL = "/api/v1/payments/orders"


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def status_repository() -> AsyncMock:
    repo = AsyncMock()
    repo.find_status.return_value = StatusRecord()
    repo.mark_sent.return_value = True
    repo.mark_failed.return_value = True
    return repo


def _gateway(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"id": "order_Nx1", "amount": 50000, "currency": "INR"})


@pytest.fixture
def live_channel(checkout_config) -> LiveChannel:
    return LiveChannel(
        client_factory=lambda: RazorpayClient(
            key_id="rzp_test_key",
            key_secret=KEY_SECRET,
            transport=httpx.MockTransport(_gateway),
        ),
        config=checkout_config,
    )


@pytest.fixture
def simulated_channel() -> SimulatedChannel:
    return SimulatedChannel(delay_seconds=0.01)


def _override(channel, status_repository, order_repository, sender_config) -> None:
    logger = MagicMock()
    confirm_handler = ConfirmPaymentHandler(
        event_source=EventSource(watched_collection="jobApplications"),
        content_builder=ContentBuilder(sender=sender_config, brand_name="Freequo"),
        executor=PaymentExecutor(channel=channel, logger=logger),
        status_writer=StatusWriter(repository=status_repository, logger=logger),
        order_repository=order_repository,
        event_bus=AsyncMock(),
        logger=logger,
    )
    create_handler = CreatePaymentOrderHandler(
        channel=channel, order_repository=order_repository, logger=logger
    )
    resolve_handler = ResolvePaymentOutcomeHandler(
        channel=channel, order_repository=order_repository, logger=logger
    )

    app.dependency_overrides[get_payment_channel] = lambda: channel
    app.dependency_overrides[get_confirm_payment_handler] = lambda: confirm_handler
    app.dependency_overrides[get_create_payment_order_handler] = lambda: create_handler
    app.dependency_overrides[get_resolve_payment_outcome_handler] = (
        lambda: resolve_handler
    )
    app.dependency_overrides[get_status_repository] = lambda: status_repository
    app.dependency_overrides[get_payment_order_repository] = lambda: order_repository


@pytest.fixture
def live_client(live_channel, status_repository, order_repository, sender_config):
    _override(live_channel, status_repository, order_repository, sender_config)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def simulated_client(
    simulated_channel, status_repository, order_repository, sender_config
):
    _override(simulated_channel, status_repository, order_repository, sender_config)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _confirmation_body() -> dict:
    body = payment_order_data()
    del body["orderId"]
    return body


def _sign(order_id: str, payment_id: str) -> str:
    return hmac.new(
        KEY_SECRET.encode(), f"{order_id}|{payment_id}".encode(), hashlib.sha256
    ).hexdigest()


# =============================================================================
# Tests
# =============================================================================


@pytest.mark.api
class TestCreateOrder:
    """POST /api/v1/payments/orders."""

    def test_live_order_created(self, live_client, order_repository):
        # Act
        response = live_client.post(
            ORDERS_URL,
            json={"jobId": "job_42", "amount": "500", "milestone": "Milestone 1"},
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["orderId"] == "order_Nx1"
        assert data["amount"] == 50000
        assert data["currency"] == "INR"
        assert data["isMock"] is False
        order_repository.save.assert_awaited_once()

    def test_simulated_order_is_mock(self, simulated_client):
        response = simulated_client.post(
            ORDERS_URL, json={"jobId": "job_42", "amount": 500}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["orderId"].startswith("mock_order_")
        assert data["isMock"] is True

    def test_non_positive_amount_rejected(self, simulated_client):
        response = simulated_client.post(
            ORDERS_URL, json={"jobId": "job_42", "amount": 0}
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "amount"


@pytest.mark.api
class TestConfirmPayment:
    """POST /api/v1/payments/orders/{order_id}/confirmation."""

    def test_simulated_confirmation_succeeds(self, simulated_client, status_repository):
        # Act
        response = simulated_client.post(
            f"{ORDERS_URL}/order_Nx1/confirmation", json=_confirmation_body()
        )

        # Assert
        assert response.status_code == 200
        payload = response.json()
        assert payload["status"] == "Success"
        assert payload["razorpay_order_id"] == "order_Nx1"
        assert payload["razorpay_payment_id"].startswith("mock_pay_")
        assert payload["jobId"] == "job_42"
        assert payload["correlationId"] == "job_42"
        assert payload["amount"] == 500.0
        assert payload["isMock"] is True
        assert status_repository.mark_sent.await_args.kwargs["simulated"] is True

    def test_live_outcome_before_confirmation(self, live_client, status_repository):
        # Arrange
        outcome = live_client.post(
            f"{ORDERS_URL}/order_Nx1/outcome",
            json={
                "status": "succeeded",
                "response": {
                    "razorpay_order_id": "order_Nx1",
                    "razorpay_payment_id": "pay_1",
                    "razorpay_signature": _sign("order_Nx1", "pay_1"),
                },
            },
        )

        # Act
        response = live_client.post(
            f"{ORDERS_URL}/order_Nx1/confirmation", json=_confirmation_body()
        )

        # Assert
        assert outcome.status_code == 202
        assert outcome.json() == {
            "orderId": "order_Nx1",
            "status": "succeeded",
            "delivered": True,
        }
        payload = response.json()
        assert response.status_code == 200
        assert payload["status"] == "Success"
        assert payload["razorpay_payment_id"] == "pay_1"
        assert payload["isMock"] is False
        assert status_repository.mark_sent.await_args.kwargs["reference"] == "pay_1"

    def test_forged_signature_reports_failure(self, live_client, status_repository):
        live_client.post(
            f"{ORDERS_URL}/order_Nx1/outcome",
            json={
                "status": "succeeded",
                "response": {
                    "razorpay_order_id": "order_Nx1",
                    "razorpay_payment_id": "pay_1",
                    "razorpay_signature": "forged",
                },
            },
        )

        response = live_client.post(
            f"{ORDERS_URL}/order_Nx1/confirmation", json=_confirmation_body()
        )

        assert response.json()["status"] == "Failure"
        status_repository.mark_sent.assert_not_awaited()
        status_repository.mark_failed.assert_awaited_once()

    def test_dismissed_checkout_is_cancelled(self, live_client, status_repository):
        live_client.post(f"{ORDERS_URL}/order_Nx1/outcome", json={"status": "dismissed"})

        response = live_client.post(
            f"{ORDERS_URL}/order_Nx1/confirmation", json=_confirmation_body()
        )

        assert response.status_code == 200
        assert response.json()["status"] == "Cancelled"
        status_repository.mark_sent.assert_not_awaited()
        status_repository.mark_failed.assert_not_awaited()

    def test_already_confirmed_returns_409(self, simulated_client, status_repository):
        status_repository.find_status.return_value = StatusRecord(side_effect_sent=True)

        response = simulated_client.post(
            f"{ORDERS_URL}/order_Nx1/confirmation", json=_confirmation_body()
        )

        assert response.status_code == 409
        assert response.json()["title"] == "Resource Conflict"

    def test_incomplete_order_returns_400(self, simulated_client):
        body = _confirmation_body()
        del body["amount"]

        response = simulated_client.post(
            f"{ORDERS_URL}/order_Nx1/confirmation", json=body
        )

        assert response.status_code == 400
        problem = response.json()
        assert problem["title"] == "Validation Failed"
        assert problem["errors"][0]["field"] == "amount"


@pytest.mark.api
class TestReportOutcome:
    """POST /api/v1/payments/orders/{order_id}/outcome."""

    def test_second_outcome_returns_409(self, live_client):
        live_client.post(f"{ORDERS_URL}/order_Nx1/outcome", json={"status": "failed"})

        response = live_client.post(
            f"{ORDERS_URL}/order_Nx1/outcome", json={"status": "succeeded"}
        )

        assert response.status_code == 409

    def test_unknown_status_returns_422(self, live_client):
        response = live_client.post(
            f"{ORDERS_URL}/order_Nx1/outcome", json={"status": "captured"}
        )

        assert response.status_code == 422


@pytest.mark.api
class TestGetOrder:
    """GET /api/v1/payments/orders/{order_id}."""

    def test_confirmed_order(self, simulated_client, order_repository, status_repository):
        # Arrange
        order_repository.find_by_order_id.side_effect = None
        order_repository.find_by_order_id.return_value = PaymentOrder(
            order_id="order_Nx1", amount_minor=50000, job_id="job_42"
        )
        status_repository.find_status.return_value = StatusRecord(
            side_effect_sent=True,
            side_effect_reference="mock_pay_1",
            side_effect_simulated=True,
        )

        # Act
        response = simulated_client.get(f"{ORDERS_URL}/order_Nx1")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["orderId"] == "order_Nx1"
        assert data["confirmed"] is True
        assert data["paymentId"] == "mock_pay_1"
        assert data["isMock"] is True

    def test_missing_order_returns_404(self, simulated_client, order_repository):
        order_repository.find_by_order_id.side_effect = None
        order_repository.find_by_order_id.return_value = None

        response = simulated_client.get(f"{ORDERS_URL}/order_missing")

        assert response.status_code == 404
        assert response.json()["detail"] == "Payment order 'order_missing' not found"


@pytest.mark.api
class TestConfirmationIntegrity:
    """The confirmation is bound to the stored order it names."""

    def test_signature_from_another_order_is_rejected(
        self, live_client, status_repository
    ):
        # Arrange
        live_client.post(
            f"{ORDERS_URL}/order_Nx1/outcome",
            json={
                "status": "succeeded",
                "response": {
                    "razorpay_order_id": "order_A",
                    "razorpay_payment_id": "pay_A",
                    "razorpay_signature": _sign("order_A", "pay_A"),
                },
            },
        )

        # Act
        response = live_client.post(
            f"{ORDERS_URL}/order_Nx1/confirmation", json=_confirmation_body()
        )

        # Assert
        payload = response.json()
        assert payload["status"] == "Failure"
        assert payload["razorpay_order_id"] == "order_Nx1"
        status_repository.mark_sent.assert_not_awaited()
        assert status_repository.mark_failed.await_args.args[0] == "order_Nx1"

    def test_retry_after_dismissal_succeeds(self, simulated_client, status_repository):
        # Arrange
        simulated_client.post(
            f"{ORDERS_URL}/order_Nx1/outcome", json={"status": "dismissed"}
        )
        first = simulated_client.post(
            f"{ORDERS_URL}/order_Nx1/confirmation", json=_confirmation_body()
        )

        # Act
        retry = simulated_client.post(
            f"{ORDERS_URL}/order_Nx1/confirmation", json=_confirmation_body()
        )

        # Assert
        assert first.json()["status"] == "Cancelled"
        assert retry.json()["status"] == "Success"
        status_repository.mark_sent.assert_awaited_once()

    def test_outcome_for_unknown_order_returns_404(self, live_client, order_repository):
        order_repository.find_by_order_id.side_effect = None
        order_repository.find_by_order_id.return_value = None

        response = live_client.post(
            f"{ORDERS_URL}/order_forged/outcome", json={"status": "failed"}
        )

        assert response.status_code == 404

    def test_body_amount_is_not_trusted(self, simulated_client):
        body = _confirmation_body()
        body.update(amount=100, jobId="job_other")

        response = simulated_client.post(
            f"{ORDERS_URL}/order_Nx1/confirmation", json=body
        )

        payload = response.json()
        assert payload["status"] == "Success"
        assert payload["amount"] == 500.0
        assert payload["jobId"] == "job_42"
