"""
Writers for outputting finalized products.
"""

from .json_writer import JSONWriter, write_build_to_json

__all__ = [
    "JSONWriter",
    "write_build_to_json",
]
