"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (MISSING_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND, *_CONFLICT)
- Channel errors (CHANNEL_*): mail transport and payment gateway failures
- Payment errors (PAYMENT_*)
- Persistence errors (STATUS_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    MISSING_REQUIRED_FIELD = "missing_required_field"

    # Resource errors
    RESOURCE_NOT_FOUND = "resource_not_found"
    RESOURCE_CONFLICT = "resource_conflict"

    # Channel errors
    CHANNEL_UNAVAILABLE = "channel_unavailable"
    CHANNEL_TIMEOUT = "channel_timeout"
    CHANNEL_REJECTED = "channel_rejected"
    CHANNEL_AUTHENTICATION_FAILED = "channel_authentication_failed"
    CHANNEL_INVALID_RESPONSE = "channel_invalid_response"

    # Payment errors
    PAYMENT_GATEWAY_UNAVAILABLE = "payment_gateway_unavailable"
    PAYMENT_DECLINED = "payment_declined"
    PAYMENT_VERIFICATION_FAILED = "payment_verification_failed"
    PAYMENT_ALREADY_RESOLVED = "payment_already_resolved"

    # Persistence errors
    STATUS_WRITE_FAILED = "status_write_failed"
