"""Abstract base class for all source-format readers.

Every supported :class:`~swagdoc.core.dispatch.SourceFormat` must have
a subclass of :class:`BaseFormatReader` registered with the factory.
"""

from __future__ import annotations

import abc
import pathlib

from swagdoc.models.resource import AnnotationBlock

SWAGGER_TAG = "swagger"


class BaseFormatReader(abc.ABC):
    """Contract that every format reader must fulfil.

    Readers are pure: they receive the already-read file text and return
    the undecoded blocks found in it.  Decoding and merging happen
    downstream.

    Args:
        tag: Annotation title that marks documentation blocks.
    """

    def __init__(self, tag: str = SWAGGER_TAG) -> None:
        self.tag = tag

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def extract(self, file_path: pathlib.Path, source: str) -> list[AnnotationBlock]:
        """Extract documentation blocks from *source*.

        Args:
            file_path: Path of the file, recorded on each block.
            source: Decoded text of the file.

        Returns:
            Blocks in source order; empty if the file documents nothing.
        """
