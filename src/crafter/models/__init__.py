"""
Pydantic models for finalized products.

These models cover:
- Customer (builder/director product)
- Product (generic multi-part product)
- Vehicle and PaymentProcessor variants (factory products)
- ComponentA/ComponentB pairs (family factory products)
"""

from crafter.enums import PaymentMethod, ProductFamily, VehicleType
from crafter.models.base import Snapshot
from crafter.models.customer import Customer
from crafter.models.family import ComponentA, ComponentB
from crafter.models.payment import (
    AnyPayment,
    BankTransferProcessor,
    PaymentProcessor,
    PayPalProcessor,
    StripeProcessor,
)
from crafter.models.product import Product
from crafter.models.vehicle import SUV, AnyVehicle, Hatchback, Sedan, Vehicle

__all__ = [
    "Snapshot",
    "Customer",
    "Product",
    "Vehicle",
    "Sedan",
    "SUV",
    "Hatchback",
    "AnyVehicle",
    "PaymentProcessor",
    "PayPalProcessor",
    "StripeProcessor",
    "BankTransferProcessor",
    "AnyPayment",
    "ComponentA",
    "ComponentB",
    "VehicleType",
    "PaymentMethod",
    "ProductFamily",
]
