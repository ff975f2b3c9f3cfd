"""
Components made in matching families.

A family factory always hands out a ComponentA and a ComponentB of the same
family; ComponentB only combines with a ComponentA from its own family.
"""

from crafter.enums import ProductFamily
from crafter.models.base import Snapshot


def _label(family: str, name: str) -> str:
    family = ProductFamily(family)
    if family is ProductFamily.STANDARD:
        return name
    return f"{family.value} {name}"


class ComponentA(Snapshot):
    """First component of a family."""

    family: ProductFamily = ProductFamily.STANDARD

    def operation_a(self) -> str:
        return f"Result of {_label(self.family, 'ProductA')}"


class ComponentB(Snapshot):
    """Second component of a family, able to work with its partner A."""

    family: ProductFamily = ProductFamily.STANDARD

    def operation_b(self) -> str:
        return f"Result of {_label(self.family, 'ProductB')}"

    def combined_operation(self, partner: ComponentA) -> str:
        """
        Combine with a ComponentA of the same family.

        Raises:
            ValueError: If ``partner`` belongs to another family
        """
        mine, theirs = ProductFamily(self.family), ProductFamily(partner.family)
        if mine is not theirs:
            raise ValueError(
                f"Cannot combine {mine.value} ProductB with {theirs.value} ProductA"
            )
        return f"ProductB combines with ({partner.operation_a()})"
