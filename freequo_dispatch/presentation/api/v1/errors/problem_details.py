"""RFC 7807 Problem Details for HTTP APIs.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Name of the field with error
        code: Machine-readable error code
        message: Human-readable error message
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Examples:
        >>> problem = ProblemDetails(
        ...     type="https://api.freequo.app/errors/conflict",
        ...     title="Resource Conflict",
        ...     status=409,
        ...     detail="Payment already confirmed for this order",
        ...     instance="/api/v1/payments/orders/order_1/confirmation",
        ... )
    """

    type: str = Field(..., description="URI reference identifying the problem type")
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", ge=400, le=599)
    detail: str = Field(..., description="Explanation specific to this occurrence")
    instance: str = Field(..., description="Request path of this occurrence")
    errors: list[ErrorDetail] | None = Field(
        default=None, description="Field-specific errors (validation failures)"
    )
    trace_id: str | None = Field(default=None, description="Request trace ID")
