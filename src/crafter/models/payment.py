"""
Payment processor variants produced by the payment factory.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from crafter.enums import PaymentMethod
from crafter.models.base import Snapshot


class PaymentProcessor(Snapshot):
    """
    A payment request bound to one processor.

    Attributes:
        method: Discriminant tag (processor)
        amount: Amount to charge, in dollars
    """

    method: PaymentMethod
    amount: float = Field(..., ge=0, description="Amount to charge in dollars")

    @classmethod
    def create(cls, amount: float) -> "PaymentProcessor":
        """Create a processor for ``amount``."""
        return cls(amount=amount)


class PayPalProcessor(PaymentProcessor):
    method: Literal["paypal"] = PaymentMethod.PAYPAL.value


class StripeProcessor(PaymentProcessor):
    method: Literal["stripe"] = PaymentMethod.STRIPE.value


class BankTransferProcessor(PaymentProcessor):
    method: Literal["banktransfer"] = PaymentMethod.BANK_TRANSFER.value


AnyPayment = Annotated[
    Union[PayPalProcessor, StripeProcessor, BankTransferProcessor],
    Field(discriminator="method"),
]
