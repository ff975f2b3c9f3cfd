"""
Workflow module for step-wise construction.

Module structure:
- state.py: AssemblyState, the in-progress field values
- builders/: Builder base class and concrete builders
- director.py: Directors running named recipes against a builder
- result.py: BuildResult dataclass
- assembler.py: BatchAssembler for request files
"""

from .assembler import BatchAssembler, load_requests
from .builders import Builder, CustomerBuilder, PartsBuilder
from .director import CustomerDirector, Director, ProductDirector
from .result import BuildResult
from .state import AssemblyState

__all__ = [
    # Construction core
    "AssemblyState",
    "Builder",
    "CustomerBuilder",
    "PartsBuilder",
    "Director",
    "CustomerDirector",
    "ProductDirector",
    # Batch
    "BatchAssembler",
    "BuildResult",
    "load_requests",
]
