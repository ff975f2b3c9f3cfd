"""
Tests for application wiring and batch assembly.
"""

import json

import pytest
from pydantic import ValidationError

from crafter.config import Settings, load_settings
from crafter.context import create_context
from crafter.models import Customer, PayPalProcessor, Product, Sedan
from crafter.workflow import BatchAssembler, BuildResult, load_requests
from crafter.writers import JSONWriter, write_build_to_json


class TestSettings:
    """Tests for settings loading."""

    def test_defaults(self):
        settings = load_settings()
        assert settings == Settings()
        assert settings.strict is False
        assert settings.log_level == "WARNING"

    def test_from_file(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"strict": True, "log_level": "info", "output_dir": "out"}))
        settings = load_settings(path)
        assert settings.strict is True
        assert settings.log_level == "INFO"
        assert settings.output_dir.name == "out"

    def test_overrides_win_and_none_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"strict": True, "log_level": "DEBUG"}))
        settings = load_settings(path, strict=False, log_level=None)
        assert settings.strict is False
        assert settings.log_level == "DEBUG"

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"verbose": True}))
        with pytest.raises(ValidationError):
            load_settings(path)


class TestAppContext:
    """Tests for the application context."""

    def test_directors_share_context_builders(self):
        context = create_context()
        assert context.customer_director.builder is context.customer_builder
        assert context.product_director.builder is context.parts_builder

    def test_strict_setting_reaches_builders(self):
        context = create_context(Settings(strict=True))
        assert context.customer_builder.strict
        assert context.parts_builder.strict

    def test_contexts_are_independent(self):
        first = create_context()
        second = create_context()
        first.customer_builder.set_first_name("Jane")
        assert second.customer_builder.finalize() == Customer()


class TestBatchAssembler:
    """Tests for BatchAssembler."""

    def test_mixed_requests(self):
        assembler = BatchAssembler(create_context())
        result = assembler.assemble(
            [
                {
                    "kind": "customer",
                    "recipe": "full",
                    "values": {
                        "first_name": "abc",
                        "last_name": "123",
                        "phone_number": "123-456-7890",
                        "email": "jane.doe@example.com",
                    },
                },
                {"kind": "customer", "fields": {"first_name": "John", "email": "john@x.com"}},
                {"kind": "product", "recipe": "full"},
                {"kind": "product", "parts": ["Engine"]},
                {"kind": "vehicle", "type": "Sedan", "model": "Toyota Camry", "year": 2020},
                {"kind": "payment", "method": "paypal", "amount": 100},
            ]
        )

        assert not result.has_errors
        assert result.total == 6
        assert result.products["customer"][1] == Customer(first_name="John", email="john@x.com")
        assert result.products["product"] == [
            Product(parts=("PartA", "PartB", "PartC")),
            Product(parts=("Engine",)),
        ]
        assert isinstance(result.products["vehicle"][0], Sedan)

    def test_failures_are_collected(self):
        assembler = BatchAssembler(create_context())
        result = assembler.assemble(
            [
                {"kind": "vehicle", "type": "minivan", "model": "Honda Odyssey", "year": 2022},
                {"kind": "spaceship"},
                {"kind": "customer", "fields": {"age": 3}},
                {"kind": "payment", "method": "stripe", "amount": 20},
            ]
        )

        assert result.total == 1
        assert len(result.errors) == 3
        assert result.errors[0].startswith("Request 0: Unknown vehicle type 'minivan'")
        assert "unknown request kind 'spaceship'" in result.errors[1]
        assert "no field 'age'" in result.errors[2]

    def test_failed_strict_request_does_not_leak(self):
        """Test a rejected request leaves nothing behind for the next one."""
        assembler = BatchAssembler(create_context(Settings(strict=True)))
        result = assembler.assemble(
            [
                {"kind": "customer", "fields": {"first_name": "Jane", "last_name": "Doe"}},
                {
                    "kind": "customer",
                    "fields": {"last_name": "Roe", "first_name": "Rick", "email": "r@x.com"},
                },
            ]
        )

        assert len(result.errors) == 1
        assert "missing required field(s) email" in result.errors[0]
        assert result.products["customer"] == [
            Customer(first_name="Rick", last_name="Roe", email="r@x.com")
        ]

    def test_malformed_request_bodies(self):
        """Test wrongly shaped entries become errors and the batch carries on."""
        assembler = BatchAssembler(create_context())
        result = assembler.assemble(
            [
                {"kind": "customer", "fields": ["first_name"]},
                {"kind": "customer", "recipe": "minimal", "values": "John"},
                {"kind": "product", "parts": "Engine"},
                {"kind": "vehicle", "type": "sedan", "model": "Toyota Camry", "year": 2020},
            ]
        )

        assert len(result.errors) == 3
        assert result.errors[0] == "Request 0: 'fields' must be an object, got list"
        assert result.errors[1] == "Request 1: 'values' must be an object, got str"
        assert result.errors[2] == "Request 2: 'parts' must be a list, got str"
        assert "product" not in result.products
        assert isinstance(result.products["vehicle"][0], Sedan)

    def test_empty_batch(self):
        result = BatchAssembler(create_context()).assemble([])
        assert result.total == 0
        assert result.warnings == ["No build requests given"]

    def test_summary(self):
        result = BuildResult(source_file="req.json", errors=["Request 0: boom"])
        result.add("vehicle", Sedan.create("Toyota Camry", 2020))
        summary = result.summary()
        assert "Source: req.json" in summary
        assert "vehicle: 1" in summary
        assert "Request 0: boom" in summary


class TestLoadRequests:
    """Tests for reading request files."""

    def test_list(self, tmp_path):
        path = tmp_path / "requests.json"
        path.write_text(json.dumps([{"kind": "product"}]))
        assert load_requests(path) == [{"kind": "product"}]

    def test_wrapped(self, tmp_path):
        path = tmp_path / "requests.json"
        path.write_text(json.dumps({"requests": [{"kind": "product"}]}))
        assert load_requests(path) == [{"kind": "product"}]

    def test_bad_shape(self, tmp_path):
        path = tmp_path / "requests.json"
        path.write_text(json.dumps({"kind": "product"}))
        with pytest.raises(ValueError):
            load_requests(path)


class TestJSONWriter:
    """Tests for JSON output."""

    def test_write_products(self, tmp_path):
        writer = JSONWriter(tmp_path / "out")
        path = writer.write_products("vehicle", [Sedan.create("Toyota Camry", 2020)])
        assert path.name == "vehicle.json"
        assert json.loads(path.read_text()) == [
            {"kind": "sedan", "model": "Toyota Camry", "year": 2020}
        ]

    def test_write_build(self, tmp_path):
        result = BuildResult()
        result.add("customer", Customer(first_name="Jane"))
        result.add("product", Product(parts=("PartA",)))
        paths = write_build_to_json(result, tmp_path)
        assert set(paths) == {"customer", "product"}
        assert json.loads(paths["product"].read_text()) == [{"parts": ["PartA"]}]

    def test_records_are_plain_json(self, tmp_path):
        """Test enum tags and tuples are already plain JSON values in each record."""
        writer = JSONWriter(tmp_path)
        path = writer.write_products(
            "payment", [PayPalProcessor.create(12.5), PayPalProcessor.create(100)]
        )
        assert json.loads(path.read_text()) == [
            {"method": "paypal", "amount": 12.5},
            {"method": "paypal", "amount": 100.0},
        ]
