"""Exception hierarchy for descriptor generation.

Every error raised here is fatal for the generation pass except
:class:`StoreFrozenError`, which signals a programming error.
"""

from __future__ import annotations

import pathlib


class SwagdocError(Exception):
    """Base class for all swagdoc errors."""


class ConfigurationError(SwagdocError, ValueError):
    """A required option is missing or inconsistent."""


class UnsupportedFormatError(SwagdocError):
    """A configured source file has an extension with no registered reader."""

    def __init__(self, path: pathlib.Path) -> None:
        self.path = path
        super().__init__(f"Unsupported extension '{path.suffix}' for file: {path}")


class AnnotationDecodeError(SwagdocError):
    """An annotation body or declarative file is not valid YAML."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Error parsing descriptor in file {source}: {reason}")


class StoreFrozenError(SwagdocError, RuntimeError):
    """Raised when a frozen :class:`ResourceStore` is mutated."""
