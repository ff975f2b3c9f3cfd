"""
Factories for closed discriminated types.

Each factory maps a case-insensitive tag to a constructor. Registries are
fixed at import time.
"""

from crafter.factories.base import VariantFactory, variant_tags
from crafter.factories.families import ComponentFactory, create_family, family_factory
from crafter.factories.payments import create_processor, payment_factory, process_payment
from crafter.factories.vehicles import create_vehicle, describe_vehicle, vehicle_factory

__all__ = [
    "VariantFactory",
    "variant_tags",
    "vehicle_factory",
    "create_vehicle",
    "describe_vehicle",
    "payment_factory",
    "create_processor",
    "process_payment",
    "family_factory",
    "create_family",
    "ComponentFactory",
]
