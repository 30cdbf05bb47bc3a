"""Payment status enums.

GatewayStatus is what the payment channel reports; PaymentStatus is the
normalized status every consumer sees.
"""

from enum import Enum


class GatewayStatus(str, Enum):
    """Terminal states reported by the payment channel."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    DISMISSED = "dismissed"


class PaymentStatus(str, Enum):
    """Normalized payment result status."""

    SUCCESS = "Success"
    FAILURE = "Failure"
    CANCELLED = "Cancelled"
