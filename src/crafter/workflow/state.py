"""
In-progress construction state.

AssemblyState holds the partially-built field values for one product. The
set of fields is fixed when the state is created; values are copied in and
out so nothing handed to a caller aliases the live state.
"""

import copy
import logging
from typing import Any, Iterator, Mapping

from crafter.errors import UnknownFieldError

logger = logging.getLogger(__name__)


class AssemblyState:
    """
    Mutable accumulator of field values for a single product.

    Not safe for concurrent use: a state (and the builder that owns it)
    must have one owner at a time.

    Args:
        name: Product name, used in error messages
        defaults: Declared fields and their "unset" values
    """

    def __init__(self, name: str, defaults: Mapping[str, Any]):
        self.name = name
        self._defaults = copy.deepcopy(dict(defaults))
        self._values: dict[str, Any] = {}
        self.reset()

    @property
    def fields(self) -> tuple[str, ...]:
        """Declared field names, in declaration order."""
        return tuple(self._defaults)

    def __contains__(self, name: object) -> bool:
        return name in self._defaults

    def __iter__(self) -> Iterator[str]:
        return iter(self._defaults)

    def get(self, name: str) -> Any:
        """Current value of a declared field."""
        self._check(name)
        return self._values[name]

    def set(self, name: str, value: Any) -> None:
        """Overwrite a declared field. Last write wins."""
        self._check(name)
        self._values[name] = value

    def append(self, name: str, item: Any) -> None:
        """Append an item to a collection-valued field."""
        self._check(name)
        current = self._values[name]
        if isinstance(current, tuple):
            self._values[name] = current + (item,)
        elif isinstance(current, list):
            current.append(item)
        else:
            raise TypeError(f"{self.name}.{name} is not a collection field")

    def is_set(self, name: str) -> bool:
        """True if the field holds something other than its default."""
        self._check(name)
        return self._values[name] != self._defaults[name]

    def unset_fields(self) -> list[str]:
        """Fields still at their default value."""
        return [name for name in self._defaults if not self.is_set(name)]

    def snapshot(self) -> dict[str, Any]:
        """Deep copy of all current values."""
        return copy.deepcopy(self._values)

    def reset(self) -> None:
        """Restore every field to its default."""
        self._values = copy.deepcopy(self._defaults)

    def _check(self, name: str) -> None:
        if name not in self._defaults:
            raise UnknownFieldError(self.name, name)

    def __repr__(self) -> str:
        return f"AssemblyState({self.name!r}, {self._values!r})"
