"""
Exception types raised by the construction workflow.

All errors are raised synchronously at the call that detects the problem
and are never retried internally.
"""

from typing import Iterable


class CrafterError(Exception):
    """Base class for all construction errors."""


class IncompleteAssemblyError(CrafterError):
    """A strict builder was finalized with mandatory fields still unset."""

    def __init__(self, product: str, missing: Iterable[str]):
        self.product = product
        self.missing = list(missing)
        super().__init__(
            f"Cannot finalize {product}: missing required field(s) {', '.join(self.missing)}"
        )

    @property
    def field(self) -> str:
        """First missing field."""
        return self.missing[0]


class BuilderNotBoundError(CrafterError):
    """A director recipe was invoked before set_builder()."""

    def __init__(self, director: str):
        self.director = director
        super().__init__(f"{director} has no builder bound; call set_builder() first")


class UnknownVariantError(CrafterError):
    """A factory was asked for a tag it does not know."""

    def __init__(self, factory: str, tag: str, known: Iterable[str] = ()):
        self.factory = factory
        self.tag = tag
        self.known = sorted(known)
        message = f"Unknown {factory} type '{tag}'"
        if self.known:
            message += f" (expected one of: {', '.join(self.known)})"
        super().__init__(message)


class UnknownFieldError(CrafterError):
    """A builder was asked to set a field its product does not declare."""

    def __init__(self, product: str, name: str):
        self.product = product
        self.name = name
        super().__init__(f"{product} has no field '{name}'")


class UnknownRecipeError(CrafterError):
    """A director was asked to run a recipe it does not define."""

    def __init__(self, director: str, recipe: str, known: Iterable[str] = ()):
        self.director = director
        self.recipe = recipe
        self.known = sorted(known)
        super().__init__(
            f"{director} has no recipe '{recipe}' (available: {', '.join(self.known)})"
        )
