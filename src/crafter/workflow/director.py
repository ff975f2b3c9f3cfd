"""
Directors sequence builder calls into named recipes.

A recipe is an ordered tuple of setter names declared on the director
class. Setters named ``set_<field>`` for a declared product field take the
matching caller-supplied value; any other setter takes no argument.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, Optional, TypeVar

from crafter.errors import BuilderNotBoundError, UnknownRecipeError
from crafter.models.base import Snapshot
from crafter.models.customer import Customer
from crafter.models.product import Product
from crafter.workflow.builders import Builder, CustomerBuilder, PartsBuilder

logger = logging.getLogger(__name__)

B = TypeVar("B", bound=Builder)


class Director(Generic[B]):
    """
    Runs fixed recipes against exactly one bound builder.

    Directors keep no state between recipe calls. Each recipe ends with
    finalize(), so the bound builder is reset for the next call; a recipe
    that fails part way resets the builder before re-raising.
    """

    recipes: ClassVar[dict[str, tuple[str, ...]]] = {}

    def __init__(self, builder: Optional[B] = None):
        self._builder = builder

    def set_builder(self, builder: B) -> None:
        """Bind (or rebind) the builder used by every recipe."""
        self._builder = builder

    @property
    def is_bound(self) -> bool:
        return self._builder is not None

    @property
    def builder(self) -> B:
        """
        The bound builder.

        Raises:
            BuilderNotBoundError: If set_builder() was never called
        """
        if self._builder is None:
            raise BuilderNotBoundError(type(self).__name__)
        return self._builder

    def build(self, recipe: str, **values: Any) -> Snapshot:
        """
        Run a recipe by name and return the finalized product.

        Args:
            recipe: Name of a recipe declared in ``recipes``
            **values: One value per ``set_<field>`` step of the recipe

        Returns:
            The finalized product

        Raises:
            BuilderNotBoundError: If no builder is bound
            UnknownRecipeError: If ``recipe`` is not declared
            TypeError: If a step's value is missing or an extra value is given
        """
        builder = self.builder
        steps = self.recipes.get(recipe)
        if steps is None:
            raise UnknownRecipeError(type(self).__name__, recipe, self.recipes)

        expected = [
            step[len("set_"):]
            for step in steps
            if step.startswith("set_") and step[len("set_"):] in builder.state
        ]
        missing = [name for name in expected if name not in values]
        if missing:
            raise TypeError(f"recipe '{recipe}' missing value(s) for: {', '.join(missing)}")
        unexpected = sorted(set(values) - set(expected))
        if unexpected:
            raise TypeError(f"recipe '{recipe}' got unexpected value(s): {', '.join(unexpected)}")

        logger.debug(f"{type(self).__name__}: running '{recipe}' recipe")
        try:
            for step in steps:
                setter = getattr(builder, step)
                field = step[len("set_"):]
                if field in values:
                    setter(values[field])
                else:
                    setter()

            return builder.finalize()
        except Exception:
            # A failed recipe must not leave its values for the next one
            builder.reset()
            raise


class CustomerDirector(Director[CustomerBuilder]):
    """
    Recipes for Customer records.

    Example:
        director = CustomerDirector()
        director.set_builder(CustomerBuilder())
        jane = director.build_full("Jane", "Doe", "123-456-7890", "jane@example.com")
        john = director.build_minimal("John", "Doe", "john@example.com")
        assert john.phone_number == ""
    """

    recipes = {
        "minimal": ("set_first_name", "set_last_name", "set_email"),
        "full": ("set_first_name", "set_last_name", "set_phone_number", "set_email"),
    }

    def build_minimal(self, first_name: str, last_name: str, email: str) -> Customer:
        """Customer with name and email only."""
        return self.build(
            "minimal",
            first_name=first_name,
            last_name=last_name,
            email=email,
        )

    def build_full(
        self,
        first_name: str,
        last_name: str,
        phone_number: str,
        email: str,
    ) -> Customer:
        """Customer with every field set."""
        return self.build(
            "full",
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            email=email,
        )


class ProductDirector(Director[PartsBuilder]):
    """Recipes for the generic multi-part Product."""

    recipes = {
        "minimal": ("set_part_a",),
        "full": ("set_part_a", "set_part_b", "set_part_c"),
    }

    def build_minimal_viable(self) -> Product:
        return self.build("minimal")

    def build_full_featured(self) -> Product:
        return self.build("full")
