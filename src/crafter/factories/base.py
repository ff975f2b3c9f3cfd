"""
Closed-set type dispatch.

A VariantFactory maps discriminant tags to constructors. The registry is
fixed when the factory is created and exposed read-only; there is no way
to register a variant at runtime.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Generic, Iterable, Mapping, TypeVar

from crafter.errors import UnknownVariantError

logger = logging.getLogger(__name__)

V = TypeVar("V")


class VariantFactory(Generic[V]):
    """
    Creates variants of one closed discriminated type.

    Tags are matched case-insensitively. Each create() call is independent:
    it reads the registry and returns a freshly constructed variant, so a
    factory can be shared between threads without locking.

    Args:
        name: What the factory makes, used in error messages (e.g. "vehicle")
        variants: Mapping of tag to constructor

    Example:
        factory = VariantFactory("vehicle", {"sedan": Sedan, "suv": SUV})
        car = factory.create("SEDAN", model="Toyota Camry", year=2020)
    """

    def __init__(self, name: str, variants: Mapping[Any, Callable[..., V]]):
        self.name = name
        registry = {}
        for tag, constructor in variants.items():
            key = self.normalize(tag)
            if key in registry:
                raise ValueError(f"Duplicate {name} tag '{key}'")
            registry[key] = constructor
        self._registry = MappingProxyType(registry)

    @staticmethod
    def normalize(tag: Any) -> str:
        """Lowercase string form of a tag (enum members use their value)."""
        value = getattr(tag, "value", tag)
        return str(value).strip().lower()

    @property
    def registry(self) -> Mapping[str, Callable[..., V]]:
        """Read-only view of tag -> constructor."""
        return self._registry

    def list_variants(self) -> list[str]:
        """Registered tags, in registration order."""
        return list(self._registry)

    def __contains__(self, tag: object) -> bool:
        return self.normalize(tag) in self._registry

    def create(self, tag: Any, *params: Any, **kwargs: Any) -> V:
        """
        Construct the variant registered for ``tag``.

        Args:
            tag: Discriminant tag, any case
            *params: Positional constructor parameters
            **kwargs: Keyword constructor parameters

        Returns:
            A new variant instance

        Raises:
            UnknownVariantError: If no variant is registered for ``tag``
        """
        key = self.normalize(tag)
        constructor = self._registry.get(key)
        if constructor is None:
            raise UnknownVariantError(self.name, str(getattr(tag, "value", tag)), self._registry)

        logger.debug(f"Creating {self.name} variant '{key}'")
        return constructor(*params, **kwargs)

    def __repr__(self) -> str:
        return f"VariantFactory({self.name!r}, {self.list_variants()})"


def variant_tags(factories: Iterable[VariantFactory]) -> dict[str, list[str]]:
    """Map each factory name to its registered tags."""
    return {factory.name: factory.list_variants() for factory in factories}
