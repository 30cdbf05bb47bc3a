"""SideEffectStatusRepository - SQLAlchemy implementation.

Reads and conditionally updates the side-effect status columns of the
source record tables. Every UPDATE is field-scoped (only status columns)
and guarded with ``side_effect_sent IS false``; the affected row count
tells the caller whether the write happened.

Each call runs in its own short transaction so a status write is never
tied to the lifetime of an HTTP request.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import select, update

from freequo_dispatch.domain.entities import StatusRecord
from freequo_dispatch.domain.enums import EventKind
from freequo_dispatch.infrastructure.persistence.database import Database
from freequo_dispatch.infrastructure.persistence.models import (
    JobApplicationModel,
    PaymentOrderModel,
)

MODEL_FOR_KIND: dict[EventKind, type[JobApplicationModel] | type[PaymentOrderModel]] = {
    EventKind.RECORD_CREATED: JobApplicationModel,
    EventKind.PAYMENT_RESOLVED: PaymentOrderModel,
}


def _to_status(model: JobApplicationModel | PaymentOrderModel) -> StatusRecord:
    """Convert database model to domain status."""
    return StatusRecord(
        side_effect_sent=model.side_effect_sent,
        side_effect_sent_at=model.side_effect_sent_at,
        side_effect_reference=model.side_effect_reference,
        side_effect_error=model.side_effect_error,
        side_effect_error_at=model.side_effect_error_at,
        side_effect_simulated=model.side_effect_simulated,
    )


class SideEffectStatusRepository:
    """SQLAlchemy status persistence for source records.

    Example:
        >>> repo = SideEffectStatusRepository(database)
        >>> await repo.mark_sent("app-1", EventKind.RECORD_CREATED,
        ...     reference="<id@mail>", sent_at=now)
        True
    """

    def __init__(self, database: Database) -> None:
        self._database = database

    async def find_status(self, record_id: str, kind: EventKind) -> StatusRecord | None:
        model_cls = MODEL_FOR_KIND[kind]
        async with self._database.get_session() as session:
            result = await session.execute(
                select(model_cls).where(model_cls.id == record_id)
            )
            model = result.scalar_one_or_none()
            return _to_status(model) if model is not None else None

    async def mark_sent(
        self,
        record_id: str,
        kind: EventKind,
        *,
        reference: str | None,
        sent_at: datetime,
        simulated: bool = False,
    ) -> bool:
        return await self._conditional_update(
            record_id,
            kind,
            side_effect_sent=True,
            side_effect_sent_at=sent_at,
            side_effect_reference=reference,
            side_effect_simulated=simulated,
            side_effect_error=None,
            side_effect_error_at=None,
        )

    async def mark_failed(
        self,
        record_id: str,
        kind: EventKind,
        *,
        error: str,
        error_at: datetime,
    ) -> bool:
        return await self._conditional_update(
            record_id,
            kind,
            side_effect_error=error,
            side_effect_error_at=error_at,
        )

    async def _conditional_update(
        self, record_id: str, kind: EventKind, **values: Any
    ) -> bool:
        model_cls = MODEL_FOR_KIND[kind]
        stmt = (
            update(model_cls)
            .where(model_cls.id == record_id)
            .where(model_cls.side_effect_sent.is_(False))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        async with self._database.get_session() as session:
            result = await session.execute(stmt)
            return result.rowcount == 1
