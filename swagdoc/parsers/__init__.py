"""Format-specific annotation readers and the reader factory."""

from swagdoc.parsers.factory import ReaderFactory

__all__ = ["ReaderFactory"]
