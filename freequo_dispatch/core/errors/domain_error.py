"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for expected failures. It does NOT inherit
from Exception: errors are returned inside Result types, never raised.
The two failure categories that must reach the trigger infrastructure are
exceptions instead (see freequo_dispatch.application.errors).

Usage:
    from freequo_dispatch.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass
from typing import Any

from freequo_dispatch.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
