"""
Base model for all finalized products.

Snapshots are frozen: once a builder or factory hands one out, nothing in
this package mutates it again.
"""

from pydantic import BaseModel, ConfigDict


class Snapshot(BaseModel):
    """
    Base model for finalized, immutable products.

    Provides:
    - Frozen instances (assignment raises a validation error)
    - Rejection of undeclared fields
    - JSON serialization helpers
    """

    model_config = ConfigDict(
        # Finalized products never change
        frozen=True,
        # Use enum values in serialization
        use_enum_values=True,
        # Undeclared fields are a programming error
        extra="forbid",
        # Populate by field name or alias
        populate_by_name=True,
    )

    @classmethod
    def field_defaults(cls) -> dict:
        """Default ("unset") value of every declared field."""
        return {
            name: info.get_default(call_default_factory=True)
            for name, info in cls.model_fields.items()
        }

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self) -> str:
        """Convert to JSON string."""
        return self.model_dump_json(by_alias=True)
