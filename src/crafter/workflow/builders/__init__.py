"""
Builders for the construction workflow.

Each builder accumulates state for one product model and finalizes it into
an immutable snapshot.
"""

from crafter.workflow.builders.base import Builder
from crafter.workflow.builders.customer import CustomerBuilder
from crafter.workflow.builders.parts import PartsBuilder

__all__ = [
    "Builder",
    "CustomerBuilder",
    "PartsBuilder",
]
