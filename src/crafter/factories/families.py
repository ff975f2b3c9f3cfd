"""
Family factory.

A family tag selects a factory that makes a consistent pair of components.
The set of families is closed like every other registry here.
"""

from dataclasses import dataclass

from crafter.enums import ProductFamily
from crafter.factories.base import VariantFactory
from crafter.models.family import ComponentA, ComponentB


@dataclass(frozen=True)
class ComponentFactory:
    """Makes components that all belong to one family."""

    family: ProductFamily

    def create_product_a(self) -> ComponentA:
        return ComponentA(family=self.family)

    def create_product_b(self) -> ComponentB:
        return ComponentB(family=self.family)


family_factory: VariantFactory[ComponentFactory] = VariantFactory(
    "product family",
    {
        ProductFamily.STANDARD: lambda: ComponentFactory(ProductFamily.STANDARD),
        ProductFamily.PREMIUM: lambda: ComponentFactory(ProductFamily.PREMIUM),
    },
)


def create_family(tag: str) -> ComponentFactory:
    """
    Get the component factory for a family.

    Raises:
        UnknownVariantError: If ``tag`` names no family
    """
    return family_factory.create(tag)
