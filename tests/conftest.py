"""Pytest configuration and shared fixtures.

Environment defaults are set before any application module is imported so
the cached Settings see a testing configuration: stub mail transport,
simulated payments and an in-memory SQLite database.
"""

import os
from datetime import UTC, datetime
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("MAIL_BACKEND", "stub")
os.environ.setdefault("PAYMENT_MODE", "simulated")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from freequo_dispatch.domain.value_objects import (  # noqa: E402
    CheckoutConfig,
    MailSenderConfig,
    PaymentOrder,
)
from freequo_dispatch.infrastructure.persistence.database import Database  # noqa: E402


# =============================================================================
# Test Helpers
# =============================================================================


def job_application_data(**overrides: Any) -> dict[str, Any]:
    """Job-application record fields as the trigger delivers them."""
    data: dict[str, Any] = {
        "freelancerEmail": "asha@example.com",
        "freelancerName": "Asha Rao",
        "jobName": "Logo Design",
        "salary": "₹15,000",
        "duration": "2 weeks",
        "appliedAt": "2025-03-05T14:30:00+00:00",
    }
    data.update(overrides)
    return data


def payment_order_data(**overrides: Any) -> dict[str, Any]:
    """Checkout order data as the UI holds it (amount in paise)."""
    data: dict[str, Any] = {
        "orderId": "order_Nx1",
        "amount": 50000,
        "currency": "INR",
        "jobId": "job_42",
        "milestone": "Milestone 1",
        "jobTitle": "Logo Design",
        "userName": "Ravi",
        "userEmail": "ravi@example.com",
    }
    data.update(overrides)
    return data


def stored_order(order_id: str = "order_Nx1", **overrides: Any) -> PaymentOrder:
    """PaymentOrder as PaymentOrderRepository returns it after creation."""
    fields: dict[str, Any] = {
        "order_id": order_id,
        "amount_minor": 50000,
        "currency": "INR",
        "job_id": "job_42",
        "milestone": "Milestone 1",
        "job_title": "Logo Design",
    }
    fields.update(overrides)
    return PaymentOrder(**fields)


APPLIED_AT = datetime(2025, 3, 5, 14, 30, tzinfo=UTC)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; ``bind`` returns the same mock."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def order_repository() -> AsyncMock:
    """PaymentOrderRepository double that knows every order id."""
    repo = AsyncMock()
    repo.find_by_order_id.side_effect = lambda order_id: stored_order(order_id)
    return repo


@pytest.fixture
def sender_config() -> MailSenderConfig:
    return MailSenderConfig(
        from_address="no-reply@freequo.app",
        from_name="Freequo",
        timeout_seconds=0.5,
        dashboard_url="https://freequo.app/freelancer/dashboard",
    )


@pytest.fixture
def checkout_config() -> CheckoutConfig:
    return CheckoutConfig(
        brand_name="Freequo",
        key_id=None,
        theme_color="#667eea",
        logo_url="/logo.png",
    )


@pytest_asyncio.fixture
async def test_database(tmp_path: Path):
    """Fresh file-backed SQLite database per test, tables created."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'dispatch.db'}")
    await database.create_all()
    yield database
    await database.close()
