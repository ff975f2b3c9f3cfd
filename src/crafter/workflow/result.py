"""
Batch build result dataclass.

Holds the output of building many products in one pass.
"""

from dataclasses import dataclass, field
from typing import Optional

from crafter.models.base import Snapshot


@dataclass
class BuildResult:
    """
    Result of running a batch of build requests.

    Failed requests do not stop the batch; their messages land in
    ``errors`` and no product is recorded for them.

    Attributes:
        products: Finalized products grouped by kind ("customer", "vehicle", ...)
        source_file: Path to the request file, if any
        warnings: Non-fatal issues encountered
        errors: Per-request failures
    """

    products: dict[str, list[Snapshot]] = field(default_factory=dict)
    source_file: Optional[str] = None
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def add(self, kind: str, product: Snapshot) -> None:
        """Record a finalized product under its kind."""
        self.products.setdefault(kind, []).append(product)

    @property
    def total(self) -> int:
        """Number of products built."""
        return sum(len(items) for items in self.products.values())

    @property
    def has_errors(self) -> bool:
        """Check if there were any errors."""
        return len(self.errors) > 0

    def summary(self) -> str:
        """Generate a human-readable summary."""
        lines = ["Build Summary:"]

        if self.source_file:
            lines.append(f"  Source: {self.source_file}")

        if self.products:
            for kind, items in self.products.items():
                lines.append(f"  {kind}: {len(items)}")
        else:
            lines.append("  Nothing built")

        if self.warnings:
            lines.append(f"\nWarnings ({len(self.warnings)}):")
            for w in self.warnings[:5]:  # Limit to first 5
                lines.append(f"  - {w}")

        if self.errors:
            lines.append(f"\nErrors ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  - {e}")

        return "\n".join(lines)
