"""Payment orders created for job milestones.

``id`` is the gateway order id, so a confirmation finds its row directly.
"""

from sqlalchemy import BigInteger, Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from freequo_dispatch.infrastructure.persistence.base import BaseMutableModel
from freequo_dispatch.infrastructure.persistence.models.status_columns import (
    SideEffectStatusMixin,
)


class PaymentOrderModel(SideEffectStatusMixin, BaseMutableModel):
    """A gateway order awaiting or past its confirmation.

    The side-effect columns track the payment confirmation:
    ``side_effect_reference`` holds the gateway payment id.
    """

    __tablename__ = "payment_orders"

    job_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="INR")
    milestone: Mapped[str | None] = mapped_column(String(255), nullable=True)
    job_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    freelancer_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    receipt: Mapped[str] = mapped_column(String(128), nullable=False)
    is_mock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
