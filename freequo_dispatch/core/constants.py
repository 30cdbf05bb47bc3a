"""Centralized constants for internal implementation details.

These are implementation details, NOT environment-specific configuration.
For environment-specific settings, use `freequo_dispatch/core/config.py`.
"""

# =============================================================================
# Timeouts
# =============================================================================

MAIL_TIMEOUT_DEFAULT: float = 10.0
"""Default upper bound for one mail transport round-trip in seconds."""

PAYMENT_API_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for payment gateway REST calls in seconds."""

SIMULATED_PAYMENT_DELAY_SECONDS: float = 1.5
"""Fixed delay before a simulated payment confirmation resolves."""


# =============================================================================
# Rendering
# =============================================================================

MISSING_FIELD_PLACEHOLDER: str = "N/A"
"""Shown for any optional detail absent from the triggering record."""

GENERIC_GREETING_NAME: str = "there"
"""Greeting fallback when the recipient's display name is unknown."""

MINOR_UNITS_PER_MAJOR: int = 100
"""Gateway amounts are integers in minor units (paise, cents)."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length of an external response body kept in error details."""
