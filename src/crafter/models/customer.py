"""
Customer model assembled by CustomerBuilder.
"""

from pydantic import Field

from crafter.models.base import Snapshot


class Customer(Snapshot):
    """
    A customer record.

    Every field defaults to the empty string, so a customer finalized
    without a phone number simply has ``phone_number == ""``.

    Attributes:
        first_name: Given name
        last_name: Family name
        phone_number: Contact phone number, free form
        email: Contact email address
    """

    first_name: str = Field(default="", description="Given name")
    last_name: str = Field(default="", description="Family name")
    phone_number: str = Field(default="", description="Contact phone number")
    email: str = Field(default="", description="Contact email address")

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def __str__(self) -> str:
        """String representation."""
        contact = self.email or self.phone_number or "no contact"
        return f"{self.full_name or 'Unnamed customer'} <{contact}>"
