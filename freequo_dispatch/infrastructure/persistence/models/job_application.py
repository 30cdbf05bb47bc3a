"""Job application records (the watched collection)."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from freequo_dispatch.infrastructure.persistence.base import BaseMutableModel
from freequo_dispatch.infrastructure.persistence.models.status_columns import (
    SideEffectStatusMixin,
)


class JobApplicationModel(SideEffectStatusMixin, BaseMutableModel):
    """A freelancer's application to a job.

    The side-effect columns track the application confirmation email.
    """

    __tablename__ = "job_applications"

    freelancer_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    freelancer_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    job_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    job_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    salary: Mapped[str | None] = mapped_column(String(64), nullable=True)
    duration: Mapped[str | None] = mapped_column(String(64), nullable=True)
    applied_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    data: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
