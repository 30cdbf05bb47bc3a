"""Base API client for external channel HTTP communication.

Handles what the mail API and payment gateway clients share:
- Request execution with timeout/connection error handling
- Status code classification into transient and permanent channel errors
- JSON object parsing
- Structured logging with service context

Subclasses build their own authentication and request bodies.

Architecture:
    - Infrastructure layer (adapter for external APIs)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for channel failures)
"""

from typing import Any, Generic, TypeVar

import httpx
import structlog

from freequo_dispatch.core.constants import RESPONSE_BODY_MAX_LENGTH
from freequo_dispatch.core.enums import ErrorCode
from freequo_dispatch.core.result import Failure, Result, Success
from freequo_dispatch.domain.errors import ChannelError


def provider_message(response: httpx.Response) -> str | None:
    """Extract the provider's own error message from a JSON error body.

    Understands ``{"error": {"description": ...}}`` (Razorpay),
    ``{"error": "..."}`` and ``{"message": ...}`` shapes.
    """
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        for key in ("description", "message"):
            if error.get(key):
                return str(error[key])
    elif isinstance(error, str) and error:
        return error
    if data.get("message"):
        return str(data["message"])
    return None


E = TypeVar("E", bound=ChannelError)


class BaseAPIClient(Generic[E]):
    """Base class for channel API clients with shared HTTP handling.

    Attributes:
        _base_url: API base URL (without trailing slash).
        _service_name: Channel identifier for logging and error messages.
        _error_type: ChannelError subclass returned on failure.
        _timeout: HTTP request timeout in seconds.
        _transport: Optional httpx transport (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        *,
        base_url: str,
        service_name: str,
        error_type: type[E],
        timeout: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._service_name = service_name
        self._error_type = error_type
        self._timeout = timeout
        self._transport = transport
        self._logger = structlog.get_logger(f"{service_name}_api")

    def _error(
        self,
        code: ErrorCode,
        message: str,
        *,
        is_transient: bool,
        response_body: str | None = None,
    ) -> Failure[E]:
        return Failure(
            error=self._error_type(
                code=code,
                message=message,
                service_name=self._service_name,
                is_transient=is_transient,
                response_body=response_body,
            )
        )

    async def _execute_request(
        self,
        *,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        auth: httpx.Auth | tuple[str, str] | None = None,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[httpx.Response, E]:
        """Execute one HTTP request.

        Returns:
            Success(httpx.Response) for any HTTP response.
            Failure(E) with ``is_transient=True`` on timeout or connection error.
        """
        url = f"{self._base_url}{path}"

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=headers,
                    auth=auth,
                    json=json_data,
                )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"{self._service_name}_api_timeout",
                operation=operation,
                error=str(e),
            )
            return self._error(
                ErrorCode.CHANNEL_TIMEOUT,
                f"{self._service_name.title()} API request timed out",
                is_transient=True,
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"{self._service_name}_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return self._error(
                ErrorCode.CHANNEL_UNAVAILABLE,
                f"Failed to connect to {self._service_name.title()} API: {e}",
                is_transient=True,
            )

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[E] | None:
        """Classify a non-2xx response.

        429 and 5xx are transient. 400, 401, 403, 404, 422 and anything
        else unexpected are permanent.

        Returns:
            Failure(E) if the status is an error, None for 2xx.
        """
        status = response.status_code

        if 200 <= status < 300:
            return None

        body = response.text[:RESPONSE_BODY_MAX_LENGTH]
        detail = provider_message(response)

        if status == 429:
            self._logger.warning(
                f"{self._service_name}_api_rate_limited",
                operation=operation,
                retry_after=response.headers.get("Retry-After"),
            )
            return self._error(
                ErrorCode.CHANNEL_UNAVAILABLE,
                detail or f"{self._service_name.title()} API rate limit exceeded",
                is_transient=True,
                response_body=body,
            )

        if status in (401, 403):
            self._logger.warning(
                f"{self._service_name}_api_auth_failed",
                operation=operation,
                status_code=status,
            )
            return self._error(
                ErrorCode.CHANNEL_AUTHENTICATION_FAILED,
                detail or f"{self._service_name.title()} API rejected the credentials",
                is_transient=False,
                response_body=body,
            )

        if status in (400, 422):
            self._logger.warning(
                f"{self._service_name}_api_rejected",
                operation=operation,
                status_code=status,
            )
            return self._error(
                ErrorCode.CHANNEL_REJECTED,
                detail or f"{self._service_name.title()} API rejected the request",
                is_transient=False,
                response_body=body,
            )

        if status >= 500:
            self._logger.warning(
                f"{self._service_name}_api_server_error",
                operation=operation,
                status_code=status,
            )
            return self._error(
                ErrorCode.CHANNEL_UNAVAILABLE,
                detail or f"{self._service_name.title()} API server error: {status}",
                is_transient=True,
                response_body=body,
            )

        self._logger.warning(
            f"{self._service_name}_api_unexpected_status",
            operation=operation,
            status_code=status,
        )
        return self._error(
            ErrorCode.CHANNEL_INVALID_RESPONSE,
            detail or f"Unexpected response from {self._service_name.title()}: {status}",
            is_transient=False,
            response_body=body,
        )

    def _parse_json_object(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[dict[str, Any], E]:
        """Check the status, then parse the body as a JSON object."""
        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                f"{self._service_name}_api_invalid_json",
                operation=operation,
                error=str(e),
            )
            return self._error(
                ErrorCode.CHANNEL_INVALID_RESPONSE,
                f"Invalid JSON response from {self._service_name.title()}",
                is_transient=False,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )

        if not isinstance(data, dict):
            return self._error(
                ErrorCode.CHANNEL_INVALID_RESPONSE,
                f"Expected object response from {self._service_name.title()}",
                is_transient=False,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )

        self._logger.debug(
            f"{self._service_name}_api_succeeded",
            operation=operation,
        )
        return Success(value=data)

    async def _execute_and_parse_object(
        self,
        *,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        auth: httpx.Auth | tuple[str, str] | None = None,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[dict[str, Any], E]:
        """Execute request and parse response as JSON object."""
        result = await self._execute_request(
            method=method,
            path=path,
            headers=headers,
            auth=auth,
            json_data=json_data,
            operation=operation,
        )

        if isinstance(result, Failure):
            return result

        return self._parse_json_object(result.value, operation)
