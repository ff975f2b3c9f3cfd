"""
Prototypes: objects that produce independent copies of themselves.

Every clone() lists the fields it owns and copies nested structures
explicitly, so a change made through a clone never shows up on the
original (and vice versa).
"""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


class Prototype(ABC):
    """Interface for objects that can clone themselves."""

    @abstractmethod
    def clone(self) -> "Prototype":
        """Return a deep, independent copy."""


@dataclass
class UserDetails:
    """Contact details owned by a UserProfile."""

    name: str
    age: int
    email: str

    def clone(self) -> "UserDetails":
        return UserDetails(name=self.name, age=self.age, email=self.email)


@dataclass
class UserProfile(Prototype):
    """
    A user profile with nested details and free-form preferences.

    Attributes:
        details: Owned contact details
        preferences: Arbitrary nested settings
    """

    details: UserDetails
    preferences: dict[str, Any] = field(default_factory=dict)

    def clone(self) -> "UserProfile":
        return UserProfile(
            details=self.details.clone(),
            preferences=copy.deepcopy(self.preferences),
        )


@dataclass
class ShapeProperties:
    """Position and colour shared by all shapes."""

    color: str
    x: float
    y: float

    def clone(self) -> "ShapeProperties":
        return ShapeProperties(color=self.color, x=self.x, y=self.y)


@dataclass
class Shape(Prototype):
    """Base shape; subclasses add their own dimensions."""

    properties: ShapeProperties

    @abstractmethod
    def clone(self) -> "Shape":
        ...


@dataclass
class Circle(Shape):
    radius: float = 0.0

    def clone(self) -> "Circle":
        return Circle(properties=self.properties.clone(), radius=self.radius)

    @property
    def area(self) -> float:
        return math.pi * self.radius**2


@dataclass
class Rectangle(Shape):
    width: float = 0.0
    height: float = 0.0

    def clone(self) -> "Rectangle":
        return Rectangle(
            properties=self.properties.clone(),
            width=self.width,
            height=self.height,
        )

    @property
    def area(self) -> float:
        return self.width * self.height
