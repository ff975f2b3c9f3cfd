"""
Vehicle factory.

The registry below is the complete set of vehicle variants. Adding one
means adding a VehicleType member, a Vehicle subclass, and an entry here.
"""

from crafter.enums import VehicleType
from crafter.factories.base import VariantFactory
from crafter.models.vehicle import SUV, Hatchback, Sedan, Vehicle

vehicle_factory: VariantFactory[Vehicle] = VariantFactory(
    "vehicle",
    {
        VehicleType.SEDAN: Sedan.create,
        VehicleType.SUV: SUV.create,
        VehicleType.HATCHBACK: Hatchback.create,
    },
)

_LABELS = {
    VehicleType.SEDAN: "Sedan",
    VehicleType.SUV: "SUV",
    VehicleType.HATCHBACK: "Hatchback",
}


def create_vehicle(tag: str, model: str, year: int) -> Vehicle:
    """
    Create a vehicle by body style.

    Args:
        tag: "sedan", "suv" or "hatchback" (any case)
        model: Make and model name
        year: Production year

    Returns:
        The matching Vehicle variant

    Raises:
        UnknownVariantError: For any other tag
    """
    return vehicle_factory.create(tag, model, year)


def describe_vehicle(vehicle: Vehicle) -> str:
    """One-line description, e.g. "Sedan Model: Toyota Camry, Year: 2020"."""
    label = _LABELS[VehicleType(vehicle.kind)]
    return f"{label} Model: {vehicle.model}, Year: {vehicle.year}"
