"""PaymentOrderRepository - SQLAlchemy implementation."""

from freequo_dispatch.domain.value_objects import PaymentOrder
from freequo_dispatch.infrastructure.persistence.database import Database
from freequo_dispatch.infrastructure.persistence.models import PaymentOrderModel


def _to_domain(model: PaymentOrderModel) -> PaymentOrder:
    """Convert database model to domain value object."""
    return PaymentOrder(
        order_id=model.id,
        amount_minor=model.amount,
        currency=model.currency,
        job_id=model.job_id,
        milestone=model.milestone,
        job_title=model.job_title,
        freelancer_name=model.freelancer_name,
    )


class PaymentOrderRepository:
    """Payment order persistence keyed by gateway order id."""

    def __init__(self, database: Database) -> None:
        self._database = database

    async def save(self, order: PaymentOrder, *, is_mock: bool, receipt: str) -> None:
        async with self._database.get_session() as session:
            session.add(
                PaymentOrderModel(
                    id=order.order_id,
                    job_id=order.job_id,
                    amount=order.amount_minor,
                    currency=order.currency,
                    milestone=order.milestone,
                    job_title=order.job_title,
                    freelancer_name=order.freelancer_name,
                    receipt=receipt,
                    is_mock=is_mock,
                )
            )

    async def find_by_order_id(self, order_id: str) -> PaymentOrder | None:
        async with self._database.get_session() as session:
            model = await session.get(PaymentOrderModel, order_id)
            return _to_domain(model) if model is not None else None
