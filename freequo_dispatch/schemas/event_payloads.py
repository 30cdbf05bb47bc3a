"""Typed views of untyped record payloads.

The trigger infrastructure hands over records as loose field mappings with
camelCase keys. These models validate them at the boundary so the rest of
the pipeline works with typed, optional-aware values. Blank strings count
as absent.
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _scalar_to_text(value: Any) -> Any:
    """Salary and duration arrive as numbers or strings; render both as text."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return str(value)
    return _blank_to_none(value)


def _read_timestamp(value: Any) -> Any:
    """Accept ISO strings, datetimes and exported Firestore timestamps."""
    if isinstance(value, dict):
        seconds = value.get("_seconds", value.get("seconds"))
        nanos = value.get("_nanoseconds", value.get("nanoseconds")) or 0
        if isinstance(seconds, int | float) and isinstance(nanos, int | float):
            return datetime.fromtimestamp(seconds + nanos / 1_000_000_000, UTC)
    return _blank_to_none(value)


class JobApplicationPayload(BaseModel):
    """Fields of a job-application record used by the confirmation email.

    Only ``freelancerEmail`` is checked strictly. Any other field whose value
    cannot be read is treated as absent.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    freelancer_email: str | None = Field(default=None, alias="freelancerEmail")
    freelancer_name: str | None = Field(default=None, alias="freelancerName")
    job_name: str | None = Field(default=None, alias="jobName")
    salary: str | None = None
    duration: str | None = None
    applied_at: datetime | None = Field(default=None, alias="appliedAt")

    @field_validator("freelancer_email", "freelancer_name", "job_name", mode="before")
    @classmethod
    def strip_blank(cls, v: Any) -> Any:
        """Treat empty and whitespace-only strings as absent."""
        return _blank_to_none(v)

    @field_validator("salary", "duration", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        """Accept numeric salary and duration values."""
        return _scalar_to_text(v)

    @field_validator("applied_at", mode="before")
    @classmethod
    def read_timestamp(cls, v: Any) -> Any:
        """Read Firestore timestamp objects; treat blank strings as absent."""
        return _read_timestamp(v)

    @field_validator(
        "freelancer_name", "job_name", "salary", "duration", "applied_at", mode="wrap"
    )
    @classmethod
    def drop_unusable(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(v)
        except ValidationError:
            return None


class PaymentOrderPayload(BaseModel):
    """Checkout order data, as the UI holds it after order creation.

    ``amount`` is in minor units (paise).
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    order_id: str = Field(alias="orderId", min_length=1)
    amount: int = Field(gt=0)
    currency: str = "INR"
    job_id: str | None = Field(default=None, alias="jobId")
    milestone: str | None = None
    job_title: str | None = Field(default=None, alias="jobTitle")
    freelancer_name: str | None = Field(default=None, alias="freelancerName")
    payer_name: str | None = Field(default=None, alias="userName")
    payer_email: str | None = Field(default=None, alias="userEmail")
    payer_phone: str | None = Field(default=None, alias="userPhone")

    @field_validator(
        "order_id",
        "job_id",
        "milestone",
        "job_title",
        "freelancer_name",
        "payer_name",
        "payer_email",
        "payer_phone",
        mode="before",
    )
    @classmethod
    def strip_blank(cls, v: Any) -> Any:
        """Treat empty and whitespace-only strings as absent."""
        return _blank_to_none(v)

    @field_validator("currency", mode="before")
    @classmethod
    def normalize_currency(cls, v: Any) -> Any:
        """Uppercase currency, defaulting when blank."""
        v = _blank_to_none(v)
        return v.upper() if isinstance(v, str) else "INR"
