"""
Crafter - step-wise builders, recipe directors and closed variant factories.

This package provides builders that accumulate fields across chained calls
and finalize them into immutable snapshots, directors that run named build
recipes, and factories that dispatch a case-insensitive tag to exactly one
variant constructor.
"""

__version__ = "0.1.0"

from crafter.config import Settings, load_settings
from crafter.context import AppContext, create_context
from crafter.errors import (
    BuilderNotBoundError,
    CrafterError,
    IncompleteAssemblyError,
    UnknownFieldError,
    UnknownRecipeError,
    UnknownVariantError,
)
from crafter.factories import (
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
from crafter.validation import SnapshotValidator, ValidationResult
from crafter.workflow import (
    AssemblyState,
    BatchAssembler,
    Builder,
    BuildResult,
    CustomerBuilder,
    CustomerDirector,
    Director,
    PartsBuilder,
    ProductDirector,
)

__all__ = [
    # Construction core
    "AssemblyState",
    "Builder",
    "CustomerBuilder",
    "PartsBuilder",
    "Director",
    "CustomerDirector",
    "ProductDirector",
    # Factories
    "VariantFactory",
    "vehicle_factory",
    "payment_factory",
    "create_vehicle",
    "create_processor",
    "describe_vehicle",
    "process_payment",
    "family_factory",
    "create_family",
    # Errors
    "CrafterError",
    "IncompleteAssemblyError",
    "BuilderNotBoundError",
    "UnknownVariantError",
    "UnknownFieldError",
    "UnknownRecipeError",
    # Application wiring
    "Settings",
    "load_settings",
    "AppContext",
    "create_context",
    # Batch and validation
    "BatchAssembler",
    "BuildResult",
    "SnapshotValidator",
    "ValidationResult",
]
