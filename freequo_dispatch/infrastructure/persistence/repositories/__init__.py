"""Repository implementations."""

from freequo_dispatch.infrastructure.persistence.repositories.payment_order_repository import (
    PaymentOrderRepository,
)
from freequo_dispatch.infrastructure.persistence.repositories.side_effect_status_repository import (
    SideEffectStatusRepository,
)

__all__ = ["PaymentOrderRepository", "SideEffectStatusRepository"]
