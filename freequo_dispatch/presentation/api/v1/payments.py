"""Payments router.

Checkout orders and their interactive confirmation. The confirmation
request stays open until the checkout widget reports an outcome through
the outcome endpoint (live mode) or the simulated delay elapses.

Endpoints:
    POST /api/v1/payments/orders                         - Create an order
    GET  /api/v1/payments/orders/{order_id}              - Order and confirmation status
    POST /api/v1/payments/orders/{order_id}/confirmation - Run the confirmation
    POST /api/v1/payments/orders/{order_id}/outcome      - Widget outcome callback
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, status
from fastapi.responses import JSONResponse
from uuid_extensions import uuid7

from freequo_dispatch.application.commands import (
    ConfirmPayment,
    CreatePaymentOrder,
    ResolvePaymentOutcome,
)
from freequo_dispatch.application.commands.handlers import (
    ConfirmPaymentHandler,
    CreatePaymentOrderHandler,
    ResolvePaymentOutcomeHandler,
)
from freequo_dispatch.application.errors import ApplicationError, ApplicationErrorCode
from freequo_dispatch.core.container import (
    get_confirm_payment_handler,
    get_create_payment_order_handler,
    get_payment_channel,
    get_payment_order_repository,
    get_resolve_payment_outcome_handler,
    get_status_repository,
)
from freequo_dispatch.core.result import Failure
from freequo_dispatch.domain.enums import EventKind
from freequo_dispatch.domain.protocols import (
    PaymentChannelProtocol,
    PaymentOrderRepository,
    SideEffectStatusRepository,
)
from freequo_dispatch.presentation.api.middleware import get_trace_id
from freequo_dispatch.presentation.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from freequo_dispatch.schemas.payment_schemas import (
    ConfirmPaymentRequest,
    CreatePaymentOrderRequest,
    PaymentOrderResponse,
    PaymentOrderStatusResponse,
    PaymentOutcomeRequest,
    PaymentOutcomeResponse,
)

router = APIRouter(prefix="/payments", tags=["Payments"])

OrderId = Annotated[str, Path(description="Gateway order id", min_length=1)]


def _error_response(error: ApplicationError, request: Request) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(
        error=error,
        request=request,
        trace_id=get_trace_id() or "",
    )


@router.post(
    "/orders",
    status_code=status.HTTP_201_CREATED,
    response_model=PaymentOrderResponse,
    summary="Create payment order",
    responses={
        400: {"model": ProblemDetails, "description": "Invalid amount or currency"},
        502: {"model": ProblemDetails, "description": "Gateway rejected the order"},
        503: {"model": ProblemDetails, "description": "Gateway unavailable"},
    },
)
async def create_order(
    request: Request,
    data: CreatePaymentOrderRequest,
    handler: CreatePaymentOrderHandler = Depends(get_create_payment_order_handler),
    channel: PaymentChannelProtocol = Depends(get_payment_channel),
) -> PaymentOrderResponse | JSONResponse:
    """Create a checkout order. Amount is given in major units."""
    result = await handler.handle(
        CreatePaymentOrder(
            job_id=data.job_id,
            amount=data.amount,
            currency=data.currency,
            milestone=data.milestone,
            job_title=data.job_title,
            freelancer_name=data.freelancer_name,
        )
    )

    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return PaymentOrderResponse.from_order(result.value, is_mock=channel.is_simulated)


@router.get(
    "/orders/{order_id}",
    response_model=PaymentOrderStatusResponse,
    summary="Get payment order",
    responses={404: {"model": ProblemDetails, "description": "Order not found"}},
)
async def get_order(
    request: Request,
    order_id: OrderId,
    orders: PaymentOrderRepository = Depends(get_payment_order_repository),
    statuses: SideEffectStatusRepository = Depends(get_status_repository),
) -> PaymentOrderStatusResponse | JSONResponse:
    """Stored order with its recorded confirmation outcome."""
    order = await orders.find_by_order_id(order_id)
    if order is None:
        return _error_response(
            ApplicationError(
                code=ApplicationErrorCode.NOT_FOUND,
                message=f"Payment order '{order_id}' not found",
            ),
            request,
        )

    record = await statuses.find_status(order_id, EventKind.PAYMENT_RESOLVED)
    return PaymentOrderStatusResponse.from_status(order, record)


@router.post(
    "/orders/{order_id}/confirmation",
    summary="Confirm payment",
    description=(
        "Open the checkout for the order and wait for its outcome. Returns the "
        "normalized callback payload for Success, Failure and Cancelled alike."
    ),
    responses={
        400: {"model": ProblemDetails, "description": "Invalid order data"},
        404: {"model": ProblemDetails, "description": "Order not found"},
        409: {"model": ProblemDetails, "description": "Already confirmed"},
        500: {"model": ProblemDetails, "description": "Outcome could not be recorded"},
    },
)
async def confirm_payment(
    request: Request,
    order_id: OrderId,
    data: ConfirmPaymentRequest,
    handler: ConfirmPaymentHandler = Depends(get_confirm_payment_handler),
) -> JSONResponse:
    result = await handler.handle(
        ConfirmPayment(
            delivery_id=get_trace_id() or str(uuid7()),
            order_data=data.to_order_data(order_id),
        )
    )

    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return JSONResponse(content=result.value.to_callback_payload())


@router.post(
    "/orders/{order_id}/outcome",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=PaymentOutcomeResponse,
    summary="Report checkout outcome",
    responses={
        404: {"model": ProblemDetails, "description": "Order not found"},
        409: {"model": ProblemDetails, "description": "Outcome already delivered"},
    },
)
async def report_outcome(
    request: Request,
    order_id: OrderId,
    data: PaymentOutcomeRequest,
    handler: ResolvePaymentOutcomeHandler = Depends(
        get_resolve_payment_outcome_handler
    ),
) -> PaymentOutcomeResponse | JSONResponse:
    """Deliver the widget's terminal outcome. Only the first one counts."""
    result = await handler.handle(
        ResolvePaymentOutcome(
            order_id=order_id,
            status=data.status,
            response=data.response,
        )
    )

    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return PaymentOutcomeResponse(order_id=order_id, status=data.status)
