"""Application layer errors.

Exports:
    ApplicationError: Application layer error dataclass
    ApplicationErrorCode: Application-level error code enum
    DispatchFailure: Base of the propagating pipeline exceptions
    TransientChannelFailure: Channel timed out or was unavailable
    StatusWriteFailure: Outcome could not be recorded
"""

from freequo_dispatch.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
    DispatchFailure,
    StatusWriteFailure,
    TransientChannelFailure,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "DispatchFailure",
    "StatusWriteFailure",
    "TransientChannelFailure",
]
