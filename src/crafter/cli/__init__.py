"""
Command-line interface for crafter.

Provides commands for building customers and products, creating factory
variants, and running batch request files.
"""

from .main import app, main

__all__ = ["main", "app"]
