"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default channel variants
- Live payment mode credential validation
- URL and currency normalization
- Environment detection
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from freequo_dispatch.core.config import Settings, get_settings
from freequo_dispatch.core.enums import Environment, MailBackend, PaymentMode


@pytest.fixture
def base_test_env():
    """Minimal environment for config tests; tests merge their overrides."""
    return {
        "ENVIRONMENT": "testing",
        "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
    }


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.unit
class TestSettingsDefaults:
    """Test default values."""

    def test_defaults_select_offline_variants(self, base_test_env):
        with patch.dict(os.environ, base_test_env, clear=True):
            settings = Settings()

        assert settings.mail_backend is MailBackend.STUB
        assert settings.payment_mode is PaymentMode.SIMULATED
        assert settings.watched_collection == "jobApplications"
        assert settings.payment_currency == "INR"
        assert settings.simulated_payment_delay_seconds == 1.5

    def test_environment_variables_override_defaults(self, base_test_env):
        env_values = base_test_env | {
            "MAIL_BACKEND": "ses",
            "AWS_REGION": "ap-south-1",
            "SIMULATED_PAYMENT_DELAY_SECONDS": "0.5",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.mail_backend is MailBackend.SES
        assert settings.aws_region == "ap-south-1"
        assert settings.simulated_payment_delay_seconds == 0.5


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field and model validation."""

    def test_live_mode_requires_razorpay_keys(self, base_test_env):
        env_values = base_test_env | {"PAYMENT_MODE": "live"}
        with patch.dict(os.environ, env_values, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

        assert "razorpay_key_id and razorpay_key_secret are required" in str(
            exc_info.value
        )

    def test_live_mode_with_keys(self, base_test_env):
        env_values = base_test_env | {
            "PAYMENT_MODE": "live",
            "RAZORPAY_KEY_ID": "rzp_test_key",
            "RAZORPAY_KEY_SECRET": "secret",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.payment_mode is PaymentMode.LIVE
        assert settings.razorpay_key_id == "rzp_test_key"

    def test_url_trailing_slash_removed(self, base_test_env):
        env_values = base_test_env | {
            "API_BASE_URL": "https://api.freequo.test/",
            "DASHBOARD_URL": "https://freequo.test/dashboard/",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.api_base_url == "https://api.freequo.test"
        assert settings.dashboard_url == "https://freequo.test/dashboard"

    def test_currency_uppercased(self, base_test_env):
        with patch.dict(os.environ, base_test_env | {"PAYMENT_CURRENCY": " usd "}, clear=True):
            settings = Settings()

        assert settings.payment_currency == "USD"

    def test_unknown_payment_mode_rejected(self, base_test_env):
        with patch.dict(os.environ, base_test_env | {"PAYMENT_MODE": "sandbox"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


@pytest.mark.unit
class TestEnvironmentDetection:
    """Test environment helper properties."""

    @pytest.mark.parametrize(
        ("environment", "json_logs"),
        [
            ("development", False),
            ("testing", True),
            ("production", True),
        ],
    )
    def test_json_logs_outside_development(self, environment, json_logs):
        with patch.dict(os.environ, {"ENVIRONMENT": environment}, clear=True):
            settings = Settings()

        assert settings.use_json_logs is json_logs
        assert settings.is_development is (environment == "development")

    def test_environment_values(self):
        assert Environment.DEVELOPMENT.value == "development"
        assert Environment.PRODUCTION.value == "production"


@pytest.mark.unit
class TestGetSettings:
    """Test cached singleton."""

    def test_returns_cached_instance(self, base_test_env):
        with patch.dict(os.environ, base_test_env, clear=True):
            first = get_settings()
            second = get_settings()

        assert first is second
