"""Immutable Money value object with Decimal precision.

Payment gateways exchange integer amounts in minor units (paise, cents).
Everything shown to people or handed back to callers uses major units with
two decimal places. Floats never touch money.

Usage:
    from freequo_dispatch.domain.value_objects import Money

    price = Money.from_minor_units(50000, "INR")
    price.amount  # Decimal("500.00")
    price.minor_units  # 50000
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Self

from freequo_dispatch.core.constants import MINOR_UNITS_PER_MAJOR

_CENTS = Decimal("0.01")


def validate_currency(code: str) -> str:
    """Validate and normalize a currency code.

    Args:
        code: Currency code (case-insensitive).

    Returns:
        Uppercase three-letter currency code.

    Raises:
        ValueError: If code is empty or not three letters.
    """
    if not code or not isinstance(code, str):
        raise ValueError("Currency code cannot be empty")

    normalized = code.upper().strip()
    if len(normalized) != 3 or not normalized.isalpha():
        raise ValueError(f"Invalid currency code: {code}")
    return normalized


@dataclass(frozen=True)
class Money:
    """Immutable monetary value with currency.

    Attributes:
        amount: Decimal value in major units, quantized to two places.
        currency: Three-letter currency code.
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        """Normalize amount and currency."""
        try:
            amount = Decimal(self.amount).quantize(_CENTS, rounding=ROUND_HALF_UP)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise ValueError(f"Invalid amount: {self.amount!r}") from e
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "currency", validate_currency(self.currency))

    @classmethod
    def from_minor_units(cls, minor_units: int, currency: str) -> Self:
        """Build Money from a gateway amount (e.g. 50000 paise -> 500.00 INR)."""
        return cls(Decimal(minor_units) / MINOR_UNITS_PER_MAJOR, currency)

    @property
    def minor_units(self) -> int:
        """Amount as the integer the gateway expects."""
        return int(self.amount * MINOR_UNITS_PER_MAJOR)

    def __str__(self) -> str:
        """Format as '500.00 INR'."""
        return f"{self.amount} {self.currency}"
