"""Razorpay REST client (orders API).

Basic auth with the key id and secret. Only the calls the payment channel
needs: order creation. Signature verification is local (HMAC-SHA256), see
``verify_payment_signature``.
"""

import hashlib
import hmac
from typing import Any

import httpx

from freequo_dispatch.core.result import Result
from freequo_dispatch.domain.errors import PaymentChannelError
from freequo_dispatch.infrastructure.http import BaseAPIClient


def verify_payment_signature(
    *, order_id: str, payment_id: str, signature: str, key_secret: str
) -> bool:
    """Check a checkout signature: HMAC-SHA256 of ``order_id|payment_id``."""
    expected = hmac.new(
        key_secret.encode(),
        f"{order_id}|{payment_id}".encode(),
        hashlib.sha256,
    ).hexdigest()
    return hmac.compare_digest(expected, signature)


class RazorpayClient(BaseAPIClient[PaymentChannelError]):
    """Async Razorpay API client.

    Example:
        >>> client = RazorpayClient(key_id="rzp_test_x", key_secret="secret")
        >>> result = await client.create_order(
        ...     amount_minor=50000, currency="INR", receipt="job_1_1700000000000"
        ... )
    """

    def __init__(
        self,
        *,
        key_id: str,
        key_secret: str,
        base_url: str = "https://api.razorpay.com/v1",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not key_id or not key_secret:
            raise ValueError("Razorpay key id and secret are required")
        super().__init__(
            base_url=base_url,
            service_name="razorpay",
            error_type=PaymentChannelError,
            timeout=timeout,
            transport=transport,
        )
        self._auth = (key_id, key_secret)
        self.key_id = key_id
        self._key_secret = key_secret

    async def create_order(
        self,
        *,
        amount_minor: int,
        currency: str,
        receipt: str,
        notes: dict[str, str] | None = None,
    ) -> Result[dict[str, Any], PaymentChannelError]:
        """POST /orders with automatic capture.

        Returns:
            Success(dict) with at least ``id``, ``amount`` and ``currency``.
        """
        return await self._execute_and_parse_object(
            method="POST",
            path="/orders",
            auth=self._auth,
            json_data={
                "amount": amount_minor,
                "currency": currency,
                "receipt": receipt,
                "payment_capture": 1,
                "notes": notes or {},
            },
            operation="create_order",
        )

    def verify_signature(self, *, order_id: str, payment_id: str, signature: str) -> bool:
        """Verify a checkout signature with this client's key secret."""
        return verify_payment_signature(
            order_id=order_id,
            payment_id=payment_id,
            signature=signature,
            key_secret=self._key_secret,
        )
