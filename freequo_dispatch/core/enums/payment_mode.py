"""Payment channel variants selectable through configuration."""

from enum import Enum


class PaymentMode(str, Enum):
    """Which PaymentChannelProtocol variant the container wires up.

    The variant is chosen once at construction. Nothing in the payment
    pipeline branches on it per call.
    """

    LIVE = "live"
    SIMULATED = "simulated"
