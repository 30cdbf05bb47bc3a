"""Result types for railway-oriented programming.

Expected failures (a missing recipient, a rejected mail request, a declined
payment) travel as data instead of exceptions, so every caller decides
explicitly what to record and what to propagate.

Usage:
    def parse_amount(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Failure(error="amount must be an integer")
        return Success(value=int(raw))

    match parse_amount("50000"):
        case Success(value=amount):
            print(f"Amount: {amount}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error describing the failure.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
