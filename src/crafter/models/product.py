"""
Generic multi-part product assembled by PartsBuilder.
"""

from pydantic import Field

from crafter.models.base import Snapshot


class Product(Snapshot):
    """
    A product made of an ordered list of named parts.

    Parts are stored as a tuple so a finalized product cannot be extended
    after the fact.
    """

    parts: tuple[str, ...] = Field(
        default=(),
        description="Parts in the order they were added",
    )

    def list_parts(self) -> str:
        """Human-readable list of parts."""
        return f"Product parts: {', '.join(self.parts)}"

    def __str__(self) -> str:
        return self.list_parts()
