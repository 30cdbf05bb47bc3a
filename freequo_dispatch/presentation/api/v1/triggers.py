"""Trigger router.

Entry point of the trigger infrastructure. Each request is one delivery of
a record creation event; deliveries are at-least-once.

Endpoints:
    POST /api/v1/triggers/record-created - Dispatch the confirmation email

Status codes:
    202: side effect attempted, outcome recorded (sent or failed)
    200: duplicate delivery, nothing done
    404: collection is not watched
    500: outcome could not be recorded (trigger redelivers)
    503: mail transport unavailable (trigger redelivers)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from freequo_dispatch.application.commands import DispatchRecordCreated
from freequo_dispatch.application.commands.handlers import (
    DispatchNotificationHandler,
)
from freequo_dispatch.application.errors import ApplicationError, ApplicationErrorCode
from freequo_dispatch.application.sources import EventSource
from freequo_dispatch.core.container import (
    get_dispatch_notification_handler,
    get_event_source,
)
from freequo_dispatch.presentation.api.middleware import get_trace_id
from freequo_dispatch.presentation.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from freequo_dispatch.schemas.trigger_schemas import (
    AttemptResponse,
    DuplicateDeliveryResponse,
    RecordCreatedTrigger,
)

router = APIRouter(prefix="/triggers", tags=["Triggers"])


@router.post(
    "/record-created",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=AttemptResponse,
    summary="Record created",
    description="Send the confirmation email for a newly created record, once.",
    responses={
        200: {"model": DuplicateDeliveryResponse, "description": "Duplicate delivery"},
        404: {"model": ProblemDetails, "description": "Collection not watched"},
        500: {"model": ProblemDetails, "description": "Status write failed"},
        503: {"model": ProblemDetails, "description": "Mail transport unavailable"},
    },
)
async def record_created(
    request: Request,
    trigger: RecordCreatedTrigger,
    event_source: EventSource = Depends(get_event_source),
    handler: DispatchNotificationHandler = Depends(get_dispatch_notification_handler),
) -> AttemptResponse | JSONResponse:
    """Dispatch one delivery of a record creation event.

    TransientChannelFailure and StatusWriteFailure propagate to the
    exception handlers, which answer 503 and 500.
    """
    if not event_source.accepts(trigger.collection):
        return ErrorResponseBuilder.from_application_error(
            error=ApplicationError(
                code=ApplicationErrorCode.NOT_FOUND,
                message=f"Collection '{trigger.collection}' is not watched",
            ),
            request=request,
            trace_id=get_trace_id() or "",
        )

    attempt = await handler.handle(
        DispatchRecordCreated(
            delivery_id=trigger.event_id,
            record_id=trigger.record_id,
            data=trigger.data,
            occurred_at=trigger.occurred_at,
        )
    )

    if attempt is None:
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=DuplicateDeliveryResponse().model_dump(),
        )

    return AttemptResponse.from_attempt(attempt)
