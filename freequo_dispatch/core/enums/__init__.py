"""Core enums package.

Usage:
    from freequo_dispatch.core.enums import ErrorCode, Environment
"""

from freequo_dispatch.core.enums.environment import Environment
from freequo_dispatch.core.enums.error_code import ErrorCode
from freequo_dispatch.core.enums.mail_backend import MailBackend
from freequo_dispatch.core.enums.payment_mode import PaymentMode

__all__ = ["ErrorCode", "Environment", "MailBackend", "PaymentMode"]
