"""
Base class for step-wise builders.

A builder accumulates field values for one Snapshot model through chainable
setters and hands out an immutable product on finalize().
"""

from __future__ import annotations

import logging
from typing import ClassVar, Generic, Type, TypeVar

from crafter.errors import IncompleteAssemblyError
from crafter.models.base import Snapshot
from crafter.workflow.state import AssemblyState

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Snapshot)
B = TypeVar("B", bound="Builder")


class Builder(Generic[P]):
    """
    Accumulates partial state and finalizes it into a product.

    Subclasses set ``product_type`` and, optionally, ``required_fields``.
    The declared fields and their defaults come from the product model.

    Lifecycle:
    1. Setters mutate the in-progress state (cumulative, last write wins)
    2. finalize() validates, snapshots, and resets the state
    3. The builder is immediately reusable for the next product

    In the default (lenient) mode missing fields silently keep their
    default. With ``strict=True`` any field in ``required_fields`` still at
    its default makes finalize() raise IncompleteAssemblyError.

    A builder needs one exclusive owner at a time; concurrent setter calls
    on the same instance are not supported.
    """

    product_type: ClassVar[Type[Snapshot]]
    required_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._state = AssemblyState(
            self.product_type.__name__,
            self.product_type.field_defaults(),
        )

    @property
    def state(self) -> AssemblyState:
        """The in-progress state (read it, mutate it through setters)."""
        return self._state

    def set_field(self: B, name: str, value) -> B:
        """
        Set a declared field on the product being built.

        Args:
            name: Field name declared on the product model
            value: New value; replaces any previous value

        Returns:
            The builder itself, for chaining

        Raises:
            UnknownFieldError: If the product does not declare ``name``
        """
        self._state.set(name, value)
        return self

    def validate(self) -> list[str]:
        """
        Pre-finalize hook.

        Returns the required fields that are still unset. Subclasses may
        extend this to add their own checks.
        """
        return [name for name in self.required_fields if not self._state.is_set(name)]

    def finalize(self) -> P:
        """
        Produce the product and reset the builder.

        On failure nothing is returned and the in-progress state is kept,
        so the caller can supply what was missing and try again.

        Returns:
            A new immutable product holding the current values

        Raises:
            IncompleteAssemblyError: In strict mode, if required fields are unset
            pydantic.ValidationError: If the values do not fit the product model
        """
        if self.strict:
            missing = self.validate()
            if missing:
                raise IncompleteAssemblyError(self.product_type.__name__, missing)

        product = self.product_type(**self._state.snapshot())
        self.reset()
        logger.debug(f"Finalized {self.product_type.__name__}: {product!r}")
        return product

    def reset(self) -> None:
        """Discard any in-progress state."""
        self._state.reset()

    def __repr__(self) -> str:
        mode = "strict" if self.strict else "lenient"
        return f"{type(self).__name__}({mode}, {self._state!r})"
