"""
Builder for the generic multi-part Product.
"""

from crafter.models.product import Product
from crafter.workflow.builders.base import Builder

PART_A = "PartA"
PART_B = "PartB"
PART_C = "PartC"


class PartsBuilder(Builder[Product]):
    """
    Builds a Product by appending parts.

    Unlike the field setters on CustomerBuilder, adding the same part twice
    appends it twice; order of calls is the order of parts.
    """

    product_type = Product
    required_fields = ("parts",)

    def add_part(self, part: str) -> "PartsBuilder":
        """Append a named part."""
        self._state.append("parts", part)
        return self

    def set_part_a(self) -> "PartsBuilder":
        return self.add_part(PART_A)

    def set_part_b(self) -> "PartsBuilder":
        return self.add_part(PART_B)

    def set_part_c(self) -> "PartsBuilder":
        return self.add_part(PART_C)
