"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Settings and environment detection

The core module has NO dependencies on other application layers.
"""

from freequo_dispatch.core.enums import ErrorCode
from freequo_dispatch.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from freequo_dispatch.core.result import Failure, Result, Success

__all__ = [
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
