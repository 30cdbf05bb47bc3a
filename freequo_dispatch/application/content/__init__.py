"""Side-effect content rendering."""

from freequo_dispatch.application.content.content_builder import (
    ORDER_MISMATCH_MESSAGE,
    PAYMENT_CANCELLED_MESSAGE,
    PAYMENT_FAILED_MESSAGE,
    ContentBuilder,
    format_applied_on,
)

__all__ = [
    "ORDER_MISMATCH_MESSAGE",
    "PAYMENT_CANCELLED_MESSAGE",
    "PAYMENT_FAILED_MESSAGE",
    "ContentBuilder",
    "format_applied_on",
]
