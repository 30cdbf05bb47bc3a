"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from freequo_dispatch.infrastructure.persistence.models.job_application import (
    JobApplicationModel,
)
from freequo_dispatch.infrastructure.persistence.models.payment_order import (
    PaymentOrderModel,
)
from freequo_dispatch.infrastructure.persistence.models.status_columns import (
    SideEffectStatusMixin,
)

__all__ = ["JobApplicationModel", "PaymentOrderModel", "SideEffectStatusMixin"]
