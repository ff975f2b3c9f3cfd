"""
Tests for the variant factories.
"""

import pytest

from crafter.enums import PaymentMethod, ProductFamily, VehicleType
from crafter.errors import UnknownVariantError
from crafter.factories import (
    ComponentFactory,
    VariantFactory,
    create_family,
    create_processor,
    create_vehicle,
    describe_vehicle,
    family_factory,
    payment_factory,
    process_payment,
    vehicle_factory,
)
from crafter.models import (
    SUV,
    BankTransferProcessor,
    ComponentA,
    ComponentB,
    Hatchback,
    PayPalProcessor,
    Sedan,
)


class TestVehicleFactory:
    """Tests for the vehicle factory."""

    def test_create_sedan(self):
        sedan = vehicle_factory.create("sedan", "Toyota Camry", 2020)
        assert isinstance(sedan, Sedan)
        assert sedan.model == "Toyota Camry"
        assert sedan.year == 2020
        assert sedan.kind == VehicleType.SEDAN

    def test_kinds_are_distinct(self):
        sedan = vehicle_factory.create("sedan", "Toyota Camry", 2020)
        suv = vehicle_factory.create("suv", "Honda CR-V", 2021)
        assert isinstance(suv, SUV)
        assert sedan.kind != suv.kind

    @pytest.mark.parametrize("tag", ["HATCHBACK", "Hatchback", " hatchback "])
    def test_case_insensitive(self, tag):
        assert isinstance(vehicle_factory.create(tag, "Volkswagen Golf", 2019), Hatchback)

    def test_enum_tag(self):
        assert isinstance(vehicle_factory.create(VehicleType.SUV, "Honda CR-V", 2021), SUV)

    def test_keyword_params(self):
        sedan = vehicle_factory.create("sedan", model="Toyota Camry", year=2020)
        assert sedan.year == 2020

    def test_unknown_tag(self):
        with pytest.raises(UnknownVariantError) as exc_info:
            vehicle_factory.create("minivan", "Honda Odyssey", 2022)
        assert exc_info.value.tag == "minivan"
        assert "minivan" in str(exc_info.value)
        assert exc_info.value.known == ["hatchback", "sedan", "suv"]

    def test_each_call_is_a_new_instance(self):
        first = create_vehicle("sedan", "Toyota Camry", 2020)
        second = create_vehicle("sedan", "Toyota Camry", 2020)
        assert first == second
        assert first is not second

    def test_describe(self):
        assert describe_vehicle(create_vehicle("sedan", "Toyota Camry", 2020)) == (
            "Sedan Model: Toyota Camry, Year: 2020"
        )
        assert describe_vehicle(create_vehicle("suv", "Honda CR-V", 2021)) == (
            "SUV Model: Honda CR-V, Year: 2021"
        )


class TestPaymentFactory:
    """Tests for the payment processor factory."""

    def test_create(self):
        assert isinstance(payment_factory.create("paypal", 100), PayPalProcessor)
        assert isinstance(payment_factory.create("BankTransfer", 300), BankTransferProcessor)

    def test_unknown_method(self):
        with pytest.raises(UnknownVariantError, match="payment processor type 'cash'"):
            create_processor("cash", 10)

    def test_process_payment(self):
        assert process_payment(create_processor("stripe", 200)) == (
            "Processing Stripe payment of $200"
        )
        assert process_payment(create_processor(PaymentMethod.BANK_TRANSFER, 300)) == (
            "Processing Bank Transfer payment of $300"
        )

    def test_fractional_amount_kept(self):
        assert process_payment(create_processor("paypal", 12.5)) == (
            "Processing PayPal payment of $12.5"
        )


class TestFamilyFactory:
    """Tests for factories that make matching component pairs."""

    def test_standard_pair(self):
        factory = create_family("standard")
        product_a = factory.create_product_a()
        product_b = factory.create_product_b()

        assert product_a.operation_a() == "Result of ProductA"
        assert product_b.operation_b() == "Result of ProductB"
        assert product_b.combined_operation(product_a) == (
            "ProductB combines with (Result of ProductA)"
        )

    def test_pair_shares_family(self):
        factory = family_factory.create(ProductFamily.PREMIUM)
        product_a = factory.create_product_a()
        product_b = factory.create_product_b()

        assert isinstance(factory, ComponentFactory)
        assert isinstance(product_a, ComponentA)
        assert isinstance(product_b, ComponentB)
        assert product_a.family == product_b.family == "premium"
        assert product_b.combined_operation(product_a) == (
            "ProductB combines with (Result of premium ProductA)"
        )

    def test_mixed_families_rejected(self):
        product_a = create_family("standard").create_product_a()
        product_b = create_family("PREMIUM").create_product_b()
        with pytest.raises(ValueError, match="Cannot combine premium ProductB with standard"):
            product_b.combined_operation(product_a)

    def test_unknown_family(self):
        with pytest.raises(UnknownVariantError, match="product family type 'deluxe'"):
            create_family("deluxe")

    def test_list_families(self):
        assert family_factory.list_variants() == ["standard", "premium"]

class TestRegistry:
    """Tests for the closed registry itself."""

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            vehicle_factory.registry["minivan"] = Sedan.create

    def test_list_variants(self):
        assert vehicle_factory.list_variants() == ["sedan", "suv", "hatchback"]
        assert payment_factory.list_variants() == ["paypal", "stripe", "banktransfer"]

    def test_contains(self):
        assert "SUV" in vehicle_factory
        assert "minivan" not in vehicle_factory

    def test_duplicate_tags_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            VariantFactory("thing", {"a": dict, "A": dict})

    def test_source_mapping_changes_ignored(self):
        variants = {"a": dict}
        factory = VariantFactory("thing", variants)
        variants["b"] = list
        assert "b" not in factory
