"""YAML decoding of annotation bodies and declarative files."""

from __future__ import annotations

from typing import Any

import structlog
import yaml

from swagdoc.core.errors import AnnotationDecodeError
from swagdoc.models.resource import AnnotationBlock, BlockKind

logger = structlog.get_logger(__name__)


def decode_block(block: AnnotationBlock) -> list[Any]:
    """Decode *block* into its YAML documents.

    Annotation bodies may hold several ``---`` separated documents, each
    decoded independently.  Declarative bodies must be a single document.
    Empty documents are dropped.

    Args:
        block: The block to decode.

    Returns:
        Decoded documents in order.

    Raises:
        AnnotationDecodeError: If the body is not valid YAML.  This is
            fatal for the whole generation pass.
    """
    try:
        if block.kind is BlockKind.DECLARATIVE:
            documents = [yaml.safe_load(block.raw_body)]
        else:
            documents = list(yaml.safe_load_all(block.raw_body))
    except yaml.YAMLError as exc:
        logger.error(
            "annotation_decode_failed",
            file=block.source_file,
            kind=block.kind.value,
            error=str(exc),
        )
        raise AnnotationDecodeError(block.source_file, str(exc)) from exc

    return [document for document in documents if document is not None]
