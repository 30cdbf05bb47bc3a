"""Registry of open payment confirmations, keyed by order id.

The widget callback and the waiting confirmation request arrive
independently and in either order. Both sides look the handle up with
``get_or_create``, so whichever comes first creates it.

A handle leaves the registry when its last waiter finishes, so a retry
after a failed or dismissed checkout opens a fresh one. An outcome that no
waiter ever collects expires after ``ttl_seconds``.
"""

import time

from freequo_dispatch.core.errors import ConflictError
from freequo_dispatch.core.result import Result
from freequo_dispatch.domain.entities import PaymentHandle
from freequo_dispatch.domain.value_objects import GatewayOutcome

DELIVERED_OUTCOME_TTL_SECONDS = 900.0


class PendingConfirmations:
    """Process-local map of order id to PaymentHandle.

    While an outcome waits for its confirmation, a duplicate callback is
    refused instead of replacing it.
    """

    def __init__(self, *, ttl_seconds: float = DELIVERED_OUTCOME_TTL_SECONDS) -> None:
        self._ttl_seconds = ttl_seconds
        self._handles: dict[str, PaymentHandle] = {}

    def __contains__(self, order_id: object) -> bool:
        return order_id in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    def get_or_create(self, order_id: str, *, is_mock: bool = False) -> PaymentHandle:
        self._evict_expired()
        handle = self._handles.get(order_id)
        if handle is None:
            handle = PaymentHandle(
                order_id=order_id, is_mock=is_mock, on_release=self._release
            )
            self._handles[order_id] = handle
        return handle

    def resolve(
        self, order_id: str, outcome: GatewayOutcome
    ) -> Result[None, ConflictError]:
        """Deliver an outcome; the first delivery per open handle wins."""
        return self.get_or_create(order_id, is_mock=outcome.is_mock).deliver(outcome)

    def _release(self, handle: PaymentHandle) -> None:
        if self._handles.get(handle.order_id) is handle:
            del self._handles[handle.order_id]

    def _evict_expired(self) -> None:
        cutoff = time.monotonic() - self._ttl_seconds
        expired = [
            order_id
            for order_id, handle in self._handles.items()
            if handle.delivered_at is not None and handle.delivered_at < cutoff
        ]
        for order_id in expired:
            del self._handles[order_id]
