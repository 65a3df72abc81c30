"""Swagdoc: API descriptor generation from annotated source files."""

__version__ = "0.1.0"
