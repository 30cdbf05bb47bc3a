"""Error response builder for RFC 7807 Problem Details.

Exports:
    ErrorResponseBuilder: Converts ApplicationError into a JSON problem response
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from freequo_dispatch.application.errors import ApplicationError, ApplicationErrorCode
from freequo_dispatch.core.config import get_settings
from freequo_dispatch.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_STATUS_FOR_CODE: dict[ApplicationErrorCode, tuple[int, str]] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
    ),
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: (
        status.HTTP_502_BAD_GATEWAY,
        "Command Execution Failed",
    ),
    ApplicationErrorCode.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ApplicationErrorCode.CONFLICT: (status.HTTP_409_CONFLICT, "Resource Conflict"),
    ApplicationErrorCode.CHANNEL_UNAVAILABLE: (
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Service Unavailable",
    ),
}


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses."""

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to an RFC 7807 JSON response.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with ProblemDetails content
        """
        status_code, title = _STATUS_FOR_CODE.get(
            error.code,
            (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"),
        )

        problem = ProblemDetails(
            type=f"{get_settings().api_base_url}/errors/{error.code.value}",
            title=title,
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            trace_id=trace_id or None,
        )

        # Field-level detail for validation failures
        field = getattr(error.domain_error, "field", None)
        if error.domain_error is not None and field is not None:
            problem.errors = [
                ErrorDetail(
                    field=field,
                    code=error.domain_error.code.value,
                    message=error.domain_error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )
