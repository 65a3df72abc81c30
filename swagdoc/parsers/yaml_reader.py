"""Reader for standalone declarative resource files (``.yml``)."""

from __future__ import annotations

import pathlib

from swagdoc.models.resource import AnnotationBlock, BlockKind
from swagdoc.parsers.base import BaseFormatReader


class YamlReader(BaseFormatReader):
    """Treats the whole file as one declarative resource document.

    No annotation tag is involved: the top-level document *is* the
    resource description.
    """

    def extract(self, file_path: pathlib.Path, source: str) -> list[AnnotationBlock]:
        if not source.strip():
            return []
        return [
            AnnotationBlock(
                source_file=str(file_path),
                raw_body=source,
                kind=BlockKind.DECLARATIVE,
            )
        ]
