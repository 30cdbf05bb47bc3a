"""Payment channel implementations.

- LiveChannel: Razorpay checkout and orders API
- SimulatedChannel: fixed-delay mock confirmations, no network
"""

from freequo_dispatch.infrastructure.payments.live_channel import LiveChannel
from freequo_dispatch.infrastructure.payments.pending_confirmations import (
    PendingConfirmations,
)
from freequo_dispatch.infrastructure.payments.razorpay_client import (
    RazorpayClient,
    verify_payment_signature,
)
from freequo_dispatch.infrastructure.payments.simulated_channel import (
    MOCK_KEY_ID,
    MOCK_SIGNATURE,
    SimulatedChannel,
)

__all__ = [
    "MOCK_KEY_ID",
    "MOCK_SIGNATURE",
    "LiveChannel",
    "PendingConfirmations",
    "RazorpayClient",
    "SimulatedChannel",
    "verify_payment_signature",
]
