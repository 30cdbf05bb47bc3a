"""Shared HTTP client plumbing for external channels."""

from freequo_dispatch.infrastructure.http.base_api_client import BaseAPIClient

__all__ = ["BaseAPIClient"]
