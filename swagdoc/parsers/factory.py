"""Factory for obtaining the correct format reader at runtime.

Adding support for a new format requires:

1. Adding a member to :class:`~swagdoc.core.dispatch.SourceFormat` and
   its extension to ``EXTENSION_FORMAT_MAP``.
2. Creating a subclass of :class:`BaseFormatReader`.
3. Registering it via :meth:`ReaderFactory.register`.
"""

from __future__ import annotations

from typing import Type

import structlog

from swagdoc.core.dispatch import SourceFormat
from swagdoc.parsers.base import SWAGGER_TAG, BaseFormatReader

logger = structlog.get_logger(__name__)


class ReaderFactory:
    """Registry-based factory that maps source formats to reader classes.

    Usage::

        factory = ReaderFactory()
        factory.register(SourceFormat.JAVASCRIPT, JavaScriptReader)
        reader = factory.get(SourceFormat.JAVASCRIPT)
    """

    def __init__(self, tag: str = SWAGGER_TAG) -> None:
        self._tag = tag
        self._registry: dict[SourceFormat, Type[BaseFormatReader]] = {}
        self._instances: dict[SourceFormat, BaseFormatReader] = {}

    def register(self, source_format: SourceFormat, reader_cls: Type[BaseFormatReader]) -> None:
        """Register a reader class for *source_format*.

        Args:
            source_format: The format handled by *reader_cls*.
            reader_cls: A concrete subclass of :class:`BaseFormatReader`.
        """
        self._registry[source_format] = reader_cls
        self._instances.pop(source_format, None)
        logger.debug("reader_registered", format=source_format.value, cls=reader_cls.__name__)

    def get(self, source_format: SourceFormat) -> BaseFormatReader:
        """Return a (cached) reader instance for *source_format*.

        Args:
            source_format: Format of the file about to be read.

        Returns:
            A reader instance.

        Raises:
            KeyError: If no reader is registered for *source_format*.
        """
        if source_format in self._instances:
            return self._instances[source_format]

        cls = self._registry.get(source_format)
        if cls is None:
            raise KeyError(f"No reader registered for format: {source_format.value}")

        instance = cls(self._tag)
        self._instances[source_format] = instance
        return instance

    @property
    def missing_formats(self) -> list[SourceFormat]:
        """Formats that have no registered reader, in declaration order."""
        return [fmt for fmt in SourceFormat if fmt not in self._registry]

    @property
    def supported_formats(self) -> list[str]:
        """Return a sorted list of registered format identifiers."""
        return sorted(fmt.value for fmt in self._registry)
