"""
Enums for variant discriminants.

These enums define the closed set of tags each factory accepts. Adding a
variant means extending the enum and the matching factory registry together.
"""

from enum import Enum


class VehicleType(str, Enum):
    """Vehicle body styles."""

    SEDAN = "sedan"
    SUV = "suv"
    HATCHBACK = "hatchback"


class PaymentMethod(str, Enum):
    """Supported payment processors."""

    PAYPAL = "paypal"
    STRIPE = "stripe"
    BANK_TRANSFER = "banktransfer"


class ProductKind(str, Enum):
    """Kinds of request accepted by batch assembly."""

    CUSTOMER = "customer"
    PRODUCT = "product"
    VEHICLE = "vehicle"
    PAYMENT = "payment"


class ProductFamily(str, Enum):
    """Families of matching component pairs."""
    STANDARD = "standard"
    PREMIUM = "premium"
