"""
Vehicle variants produced by the vehicle factory.

Each variant pins its ``kind`` discriminant, so a serialized vehicle can be
read back into the right class through the ``AnyVehicle`` union.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from crafter.enums import VehicleType
from crafter.models.base import Snapshot


class Vehicle(Snapshot):
    """
    Common fields of every vehicle variant.

    Attributes:
        kind: Discriminant tag (body style)
        model: Make and model name, e.g. "Toyota Camry"
        year: Production year
    """

    kind: VehicleType
    model: str = Field(..., min_length=1, description="Make and model name")
    year: int = Field(..., ge=1886, description="Production year")

    @classmethod
    def create(cls, model: str, year: int) -> "Vehicle":
        """
        Create a vehicle from positional factory parameters.

        Args:
            model: Make and model name
            year: Production year

        Returns:
            Vehicle instance of the calling class
        """
        return cls(model=model, year=year)

    def __str__(self) -> str:
        return f"{self.model} ({self.year})"


class Sedan(Vehicle):
    """Four-door passenger car."""

    kind: Literal["sedan"] = VehicleType.SEDAN.value


class SUV(Vehicle):
    """Sport utility vehicle."""

    kind: Literal["suv"] = VehicleType.SUV.value


class Hatchback(Vehicle):
    """Compact car with a rear hatch."""

    kind: Literal["hatchback"] = VehicleType.HATCHBACK.value


AnyVehicle = Annotated[Union[Sedan, SUV, Hatchback], Field(discriminator="kind")]
