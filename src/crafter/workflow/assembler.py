"""
Batch assembler for building many products from request records.

The orchestrator behind ``crafter batch``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Union

from crafter.enums import ProductKind
from crafter.errors import CrafterError
from crafter.models.base import Snapshot

from .result import BuildResult

if TYPE_CHECKING:
    from crafter.context import AppContext

logger = logging.getLogger(__name__)


class BatchAssembler:
    """
    Builds products from plain request records.

    Request shapes (one dict each):
    - customer: ``{"kind": "customer", "recipe": "full", "values": {...}}``
      or ``{"kind": "customer", "fields": {...}}`` to drive the builder directly
    - product:  ``{"kind": "product", "recipe": "minimal"}``
      or ``{"kind": "product", "parts": ["PartA", "PartC"]}``
    - vehicle:  ``{"kind": "vehicle", "type": "sedan", "model": "...", "year": 2020}``
    - payment:  ``{"kind": "payment", "method": "paypal", "amount": 100}``

    A failed request is recorded in the result's errors and the builder it
    used is reset, so later requests start clean.

    Example:
        assembler = BatchAssembler(create_context())
        result = assembler.assemble([
            {"kind": "vehicle", "type": "suv", "model": "Honda CR-V", "year": 2021},
        ])
        print(result.summary())
    """

    def __init__(self, context: AppContext):
        self.context = context

    def assemble(
        self,
        requests: list[dict[str, Any]],
        source_file: Optional[str] = None,
    ) -> BuildResult:
        """
        Build every request, collecting products and failures.

        Args:
            requests: Request records
            source_file: Where the requests came from, for the summary

        Returns:
            BuildResult with products grouped by kind
        """
        result = BuildResult(source_file=source_file)

        if not requests:
            result.warnings.append("No build requests given")
            return result

        for i, request in enumerate(requests):
            try:
                kind, product = self.build_one(request)
            except (CrafterError, TypeError, ValueError, KeyError) as e:
                result.errors.append(f"Request {i}: {e}")
                logger.warning(f"Request {i} failed: {e}")
                self._reset_builders()
                continue
            result.add(kind, product)

        self.context.log(f"Built {result.total} product(s), {len(result.errors)} failed")
        return result

    def build_one(self, request: dict[str, Any]) -> tuple[str, Snapshot]:
        """
        Build a single request.

        Returns:
            (kind, product) tuple

        Raises:
            ValueError: If the request kind is missing or unknown
            CrafterError: Whatever the builder, director or factory raises
        """
        if not isinstance(request, dict):
            raise TypeError(f"request must be an object, got {type(request).__name__}")

        raw_kind = request.get("kind")
        try:
            kind = ProductKind(str(raw_kind).lower())
        except ValueError:
            raise ValueError(f"unknown request kind '{raw_kind}'") from None

        if kind is ProductKind.CUSTOMER:
            product = self._build_customer(request)
        elif kind is ProductKind.PRODUCT:
            product = self._build_product(request)
        elif kind is ProductKind.VEHICLE:
            product = self.context.vehicles.create(
                request["type"], request["model"], request["year"]
            )
        else:
            product = self.context.payments.create(request["method"], request["amount"])

        return kind.value, product

    def _build_customer(self, request: dict[str, Any]) -> Snapshot:
        if "recipe" in request:
            return self.context.customer_director.build(
                request["recipe"], **_field(request, "values", dict)
            )

        builder = self.context.customer_builder
        for name, value in _field(request, "fields", dict).items():
            builder.set_field(name, value)
        return builder.finalize()

    def _build_product(self, request: dict[str, Any]) -> Snapshot:
        if "recipe" in request:
            return self.context.product_director.build(request["recipe"])

        builder = self.context.parts_builder
        for part in _field(request, "parts", list):
            builder.add_part(part)
        return builder.finalize()

    def _reset_builders(self) -> None:
        self.context.customer_builder.reset()
        self.context.parts_builder.reset()


def _field(request: dict[str, Any], key: str, expected: type) -> Any:
    """Optional request entry that must be of the ``expected`` type."""
    value = request.get(key, expected())
    if not isinstance(value, expected):
        raise TypeError(
            f"'{key}' must be {'a list' if expected is list else 'an object'}, "
            f"got {type(value).__name__}"
        )
    return value


def load_requests(path: Union[str, Path]) -> list[dict[str, Any]]:
    """
    Read build requests from a JSON file.

    The file holds either a list of requests or an object with a
    ``"requests"`` list.

    Raises:
        ValueError: If the file has neither shape
    """
    with open(path) as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("requests")
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of requests")

    return data
