"""
Payment processor factory.

Processing here only formats the message a processor would report; no
money moves.
"""

from crafter.enums import PaymentMethod
from crafter.factories.base import VariantFactory
from crafter.models.payment import (
    BankTransferProcessor,
    PaymentProcessor,
    PayPalProcessor,
    StripeProcessor,
)

payment_factory: VariantFactory[PaymentProcessor] = VariantFactory(
    "payment processor",
    {
        PaymentMethod.PAYPAL: PayPalProcessor.create,
        PaymentMethod.STRIPE: StripeProcessor.create,
        PaymentMethod.BANK_TRANSFER: BankTransferProcessor.create,
    },
)

_LABELS = {
    PaymentMethod.PAYPAL: "PayPal",
    PaymentMethod.STRIPE: "Stripe",
    PaymentMethod.BANK_TRANSFER: "Bank Transfer",
}


def create_processor(tag: str, amount: float) -> PaymentProcessor:
    """Create a payment processor by method tag (any case)."""
    return payment_factory.create(tag, amount)


def process_payment(payment: PaymentProcessor) -> str:
    """Message describing the payment, e.g. "Processing Stripe payment of $200"."""
    label = _LABELS[PaymentMethod(payment.method)]
    return f"Processing {label} payment of ${_format_amount(payment.amount)}"


def _format_amount(amount: float) -> str:
    # Whole amounts print without a fractional part: 200, 12.5
    if amount.is_integer():
        return str(int(amount))
    return repr(amount)
