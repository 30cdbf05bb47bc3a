"""Typed view of a newly created job-application record."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationNotice:
    """Validated fields of a job application, ready for rendering.

    Only ``recipient_email`` is mandatory. Optional details stay ``None``
    here; the content builder decides how absent values are displayed.

    Attributes:
        record_id: Job-application record identifier.
        recipient_email: Freelancer's email address.
        recipient_name: Freelancer's display name.
        job_name: Title of the job applied for.
        salary: Offered salary, as entered.
        duration: Engagement duration, as entered.
        applied_at: When the application was made (UTC). Falls back to the
            event's occurred_at when the record has none.
    """

    record_id: str
    recipient_email: str
    recipient_name: str | None = None
    job_name: str | None = None
    salary: str | None = None
    duration: str | None = None
    applied_at: datetime
