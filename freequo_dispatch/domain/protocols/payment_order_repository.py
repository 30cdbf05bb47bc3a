"""PaymentOrderRepository protocol.

Persists created checkout orders so a later confirmation can be matched to
its job and amount by order id alone.
"""

from typing import Protocol

from freequo_dispatch.domain.value_objects import PaymentOrder


class PaymentOrderRepository(Protocol):
    """Payment order persistence."""

    async def save(self, order: PaymentOrder, *, is_mock: bool, receipt: str) -> None:
        """Insert a newly created order."""
        ...

    async def find_by_order_id(self, order_id: str) -> PaymentOrder | None:
        """Load an order by its gateway order id."""
        ...
