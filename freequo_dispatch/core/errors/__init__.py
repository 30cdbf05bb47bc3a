"""Core errors package.

Usage:
    from freequo_dispatch.core.errors import DomainError, ValidationError, NotFoundError
"""

from freequo_dispatch.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from freequo_dispatch.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
]
