"""
Tests for soft validation of finalized products.
"""

from crafter.factories import create_processor, create_vehicle
from crafter.models import Customer, Product
from crafter.validation import SnapshotValidator, ValidationResult
from crafter.workflow import BuildResult


class TestValidationResult:
    """Tests for ValidationResult bookkeeping."""

    def test_error_marks_invalid(self):
        result = ValidationResult(is_valid=True)
        result.add_warning("a", "warn")
        assert result.is_valid
        result.add_error("b", "bad")
        assert not result.is_valid
        assert [i.field for i in result.errors] == ["b"]
        assert [i.field for i in result.warnings] == ["a"]


class TestSnapshotValidator:
    """Tests for SnapshotValidator."""

    def test_complete_customer_is_clean(self):
        customer = Customer(
            first_name="Jane",
            last_name="Doe",
            phone_number="123-456-7890",
            email="jane.doe@example.com",
        )
        result = SnapshotValidator().validate([customer])
        assert result.is_valid
        assert result.issues == []

    def test_empty_customer_warnings(self):
        result = SnapshotValidator().validate([Customer()])
        assert result.is_valid
        fields = {i.field for i in result.warnings}
        assert fields == {
            "customer[0].first_name",
            "customer[0].last_name",
            "customer[0].email",
        }

    def test_malformed_email_is_error(self):
        result = SnapshotValidator().validate([Customer(first_name="A", last_name="B", email="nope")])
        assert not result.is_valid
        assert result.errors[0].value == "nope"

    def test_unusual_phone(self):
        customer = Customer(first_name="A", last_name="B", email="a@b.co", phone_number="call me")
        result = SnapshotValidator().validate([customer])
        assert result.warnings[0].field == "customer[0].phone_number"

    def test_empty_product(self):
        result = SnapshotValidator().validate([Product()])
        assert result.warnings[0].message == "Product has no parts"

    def test_vehicle_year(self):
        validator = SnapshotValidator(max_year=2030)
        result = validator.validate([create_vehicle("suv", "Concept", 2050)])
        assert result.warnings[0].value == 2050

    def test_payment_amounts(self):
        validator = SnapshotValidator(max_amount=1000)
        result = validator.validate([create_processor("paypal", 0), create_processor("stripe", 5000)])
        messages = [i.message for i in result.warnings]
        assert messages[0] == "Zero payment amount"
        assert messages[1].startswith("Unusually large payment")

    def test_validate_build_carries_errors(self):
        build = BuildResult(errors=["Request 1: bad"], warnings=["careful"])
        build.add("vehicle", create_vehicle("sedan", "Toyota Camry", 2020))
        result = SnapshotValidator().validate_build(build)
        assert not result.is_valid
        assert result.errors[0].message == "Request 1: bad"
        assert result.warnings[0].message == "careful"
