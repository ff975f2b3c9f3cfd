"""
Customer builder.
"""

from crafter.models.customer import Customer
from crafter.workflow.builders.base import Builder


class CustomerBuilder(Builder[Customer]):
    """
    Builds Customer records one field at a time.

    Example:
        customer = (
            CustomerBuilder()
            .set_first_name("Jane")
            .set_last_name("Doe")
            .set_email("jane.doe@example.com")
            .finalize()
        )
    """

    product_type = Customer
    required_fields = ("first_name", "last_name", "email")

    def set_first_name(self, first_name: str) -> "CustomerBuilder":
        return self.set_field("first_name", first_name)

    def set_last_name(self, last_name: str) -> "CustomerBuilder":
        return self.set_field("last_name", last_name)

    def set_phone_number(self, phone_number: str) -> "CustomerBuilder":
        return self.set_field("phone_number", phone_number)

    def set_email(self, email: str) -> "CustomerBuilder":
        return self.set_field("email", email)
