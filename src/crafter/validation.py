"""
Soft validation of finalized products.

Strict builders reject missing fields outright. This module is the
reporting side: it inspects products that were already built and lists
anything worth a second look, without raising.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from crafter.models import Customer, PaymentProcessor, Product, Snapshot, Vehicle
from crafter.workflow.result import BuildResult

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PHONE_PATTERN = re.compile(r"^\+?[\d\s().-]{7,}$")


@dataclass
class ValidationIssue:
    """A single validation issue."""

    field: str
    message: str
    severity: str  # "error", "warning", "info"
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    """Result of validating finalized products."""

    is_valid: bool
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get only error-level issues."""
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get only warning-level issues."""
        return [i for i in self.issues if i.severity == "warning"]

    def add_error(self, field: str, message: str, value: Any = None) -> None:
        """Add an error issue."""
        self.issues.append(
            ValidationIssue(field=field, message=message, severity="error", value=value)
        )
        self.is_valid = False

    def add_warning(self, field: str, message: str, value: Any = None) -> None:
        """Add a warning issue."""
        self.issues.append(
            ValidationIssue(field=field, message=message, severity="warning", value=value)
        )

    def add_info(self, field: str, message: str, value: Any = None) -> None:
        """Add an info issue."""
        self.issues.append(
            ValidationIssue(field=field, message=message, severity="info", value=value)
        )


class SnapshotValidator:
    """
    Reports quality issues on finalized products.

    Validation levels:
    1. Completeness - fields left at their empty default
    2. Format - email and phone shape checks
    3. Plausibility - vehicle years and payment amounts

    Usage:
        validator = SnapshotValidator()
        result = validator.validate([customer, sedan])

        for issue in result.warnings:
            print(f"WARNING: {issue.field}: {issue.message}")
    """

    def __init__(self, max_year: int = 2100, max_amount: float = 1_000_000):
        """
        Initialize the validator.

        Args:
            max_year: Latest plausible vehicle production year
            max_amount: Largest payment amount accepted without a warning
        """
        self.max_year = max_year
        self.max_amount = max_amount

    def validate(self, products: Iterable[Snapshot]) -> ValidationResult:
        """
        Validate a collection of products.

        Args:
            products: Finalized products of any kind

        Returns:
            ValidationResult with issues found
        """
        result = ValidationResult(is_valid=True)

        for i, product in enumerate(products):
            prefix = f"{type(product).__name__.lower()}[{i}]"
            if isinstance(product, Customer):
                self._validate_customer(product, prefix, result)
            elif isinstance(product, Product):
                self._validate_product(product, prefix, result)
            elif isinstance(product, Vehicle):
                self._validate_vehicle(product, prefix, result)
            elif isinstance(product, PaymentProcessor):
                self._validate_payment(product, prefix, result)
            else:
                result.add_info(prefix, "No checks defined for this product type")

        return result

    def validate_build(self, build: BuildResult) -> ValidationResult:
        """Validate every product in a batch result, carrying over its errors."""
        products = [p for items in build.products.values() for p in items]
        result = self.validate(products)

        for error in build.errors:
            result.add_error("build", error)
        for warning in build.warnings:
            result.add_warning("build", warning)

        return result

    def _validate_customer(self, customer: Customer, prefix: str, result: ValidationResult) -> None:
        """Validate a Customer."""
        for name in ("first_name", "last_name"):
            if not getattr(customer, name).strip():
                result.add_warning(f"{prefix}.{name}", "Name field is empty")

        if not customer.email:
            result.add_warning(f"{prefix}.email", "No email address")
        elif not EMAIL_PATTERN.match(customer.email):
            result.add_error(
                f"{prefix}.email",
                f"Malformed email address '{customer.email}'",
                customer.email,
            )

        if not customer.phone_number:
            result.add_info(f"{prefix}.phone_number", "No phone number")
        elif not PHONE_PATTERN.match(customer.phone_number):
            result.add_warning(
                f"{prefix}.phone_number",
                f"Unusual phone number '{customer.phone_number}'",
                customer.phone_number,
            )

    def _validate_product(self, product: Product, prefix: str, result: ValidationResult) -> None:
        """Validate a multi-part Product."""
        if not product.parts:
            result.add_warning(f"{prefix}.parts", "Product has no parts")

        duplicates = sorted({p for p in product.parts if product.parts.count(p) > 1})
        if duplicates:
            result.add_info(f"{prefix}.parts", f"Repeated parts: {', '.join(duplicates)}")

    def _validate_vehicle(self, vehicle: Vehicle, prefix: str, result: ValidationResult) -> None:
        """Validate a Vehicle."""
        if vehicle.year > self.max_year:
            result.add_warning(
                f"{prefix}.year",
                f"Unusual production year: {vehicle.year}",
                vehicle.year,
            )

    def _validate_payment(
        self, payment: PaymentProcessor, prefix: str, result: ValidationResult
    ) -> None:
        """Validate a PaymentProcessor."""
        if payment.amount == 0:
            result.add_warning(f"{prefix}.amount", "Zero payment amount")
        elif payment.amount > self.max_amount:
            result.add_warning(
                f"{prefix}.amount",
                f"Unusually large payment: {payment.amount:.2f}",
                payment.amount,
            )
