"""Global exception handlers for the FastAPI application.

Handlers:
    dispatch_failure_handler: TransientChannelFailure → 503, StatusWriteFailure → 500
    http_exception_handler: HTTPException → RFC 7807
    validation_exception_handler: RequestValidationError → RFC 7807 with field errors

A 5xx answer to a trigger makes the trigger infrastructure redeliver it.

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from freequo_dispatch.application.errors import (
    DispatchFailure,
    TransientChannelFailure,
)
from freequo_dispatch.core.config import get_settings
from freequo_dispatch.presentation.api.middleware import get_trace_id
from freequo_dispatch.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# HTTP status code to (title, slug)
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
    502: ("Bad Gateway", "bad-gateway"),
    503: ("Service Unavailable", "service-unavailable"),
}


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    errors: list[ErrorDetail] | None = None,
) -> JSONResponse:
    title, slug = _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))
    problem = ProblemDetails(
        type=f"{get_settings().api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
        errors=errors,
        trace_id=get_trace_id(),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
    )


async def dispatch_failure_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer a failed dispatch with a 5xx so the trigger is retried.

    Args:
        request: FastAPI Request object.
        exc: TransientChannelFailure or StatusWriteFailure raised by the pipeline.

    Returns:
        JSONResponse with 503 for transient channel failures, 500 otherwise.
    """
    assert isinstance(exc, DispatchFailure)

    if isinstance(exc, TransientChannelFailure):
        return _problem_response(
            request, status.HTTP_503_SERVICE_UNAVAILABLE, exc.reason
        )
    return _problem_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, exc.reason)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to an RFC 7807 response."""
    assert isinstance(exc, HTTPException)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _problem_response(request, exc.status_code, detail)


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert RequestValidationError to RFC 7807 with per-field errors."""
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "recordId"] -> "recordId"
        field_parts = [str(p) for p in error.get("loc", []) if p != "body"]
        field_errors.append(
            ErrorDetail(
                field=".".join(field_parts) if field_parts else "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    return _problem_response(
        request,
        422,
        "Request validation failed. Check 'errors' for details.",
        errors=field_errors or None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(DispatchFailure, dispatch_failure_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
