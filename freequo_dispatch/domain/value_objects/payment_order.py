"""Typed checkout order handed to the payment channel."""

from dataclasses import dataclass

from freequo_dispatch.domain.value_objects.money import Money


@dataclass(frozen=True, slots=True, kw_only=True)
class PaymentOrder:
    """A gateway order awaiting confirmation.

    Attributes:
        order_id: Gateway order identifier (correlation id of the side effect).
        amount_minor: Amount in minor units, as the gateway expects it.
        currency: Three-letter currency code.
        job_id: Job the payment funds (the caller's correlation id).
        milestone: Milestone label the payment is for.
        job_title: Shown in the checkout description.
        freelancer_name: Payee display name.
        payer_name: Checkout prefill.
        payer_email: Checkout prefill.
        payer_phone: Checkout prefill.
    """

    order_id: str
    amount_minor: int
    currency: str = "INR"
    job_id: str | None = None
    milestone: str | None = None
    job_title: str | None = None
    freelancer_name: str | None = None
    payer_name: str | None = None
    payer_email: str | None = None
    payer_phone: str | None = None

    @property
    def money(self) -> Money:
        """Order amount in major units."""
        return Money.from_minor_units(self.amount_minor, self.currency)
