"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Resource not found
- ConflictError: Resource conflicts (duplicate delivery, state conflicts)

Usage:
    from freequo_dispatch.core.errors import ValidationError
    from freequo_dispatch.core.enums import ErrorCode
    from freequo_dispatch.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.VALIDATION_FAILED,
        message="amount must be positive",
        field="amount",
    ))
"""

from dataclasses import dataclass

from freequo_dispatch.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (JobApplication, PaymentOrder, ...).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (second delivery, already-resolved state).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has the conflict, if any.
    """

    resource_type: str
    conflicting_field: str | None = None
