"""
JSON writer for finalized products.

Writes one file per product kind (customer.json, vehicle.json, ...), each
holding a list of records.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from crafter.models.base import Snapshot
from crafter.workflow import BuildResult


class JSONWriter:
    """
    Writes finalized products to JSON files.
    """

    def __init__(self, output_dir: str | Path):
        """
        Initialize the JSON writer.

        Args:
            output_dir: Base directory for output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def write_products(self, kind: str, products: Iterable[Snapshot]) -> Path:
        """
        Write products of one kind to ``<kind>.json``.

        Args:
            kind: Product kind, used as the file name
            products: Finalized products

        Returns:
            Path to the written JSON file
        """
        records = [product.to_dict() for product in products]

        output_path = self.output_dir / f"{kind}.json"

        with open(output_path, "w") as f:
            json.dump(records, f, indent=2)

        return output_path

    def write_all(self, result: BuildResult) -> dict[str, Path]:
        """
        Write every product in a batch result.

        Args:
            result: The BuildResult from BatchAssembler

        Returns:
            Dict mapping product kinds to written file paths
        """
        paths: dict[str, Path] = {}

        for kind, products in result.products.items():
            if products:
                paths[kind] = self.write_products(kind, products)

        return paths


def write_build_to_json(result: BuildResult, output_dir: str | Path) -> dict[str, Path]:
    """
    Convenience function to write all products from a batch to JSON.

    Example:
        result = BatchAssembler(context).assemble(requests)
        paths = write_build_to_json(result, "/data/output")
        print(f"Wrote customers to: {paths['customer']}")
    """
    writer = JSONWriter(output_dir)
    return writer.write_all(result)
