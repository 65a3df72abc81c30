"""Generation orchestrator that ties readers, decoding and merging together.

This is the main entry point for building documentation: it reads
every configured file in order, extracts and decodes its annotation
blocks, classifies the decoded documents, folds them into a
:class:`ResourceStore` and finally builds the descriptor once.

Files are processed strictly one after another.  The configured order
decides which contribution wins identity and collision races, so the
loop never overlaps two files.
"""

from __future__ import annotations

import asyncio
import pathlib
from dataclasses import dataclass, field
from typing import Any

import structlog

from swagdoc.config import resolve_options
from swagdoc.core.builder import build_descriptor
from swagdoc.core.classifier import FragmentClassifier
from swagdoc.core.decoder import decode_block
from swagdoc.core.dispatch import SourceFormat, get_format_for_file
from swagdoc.core.errors import UnsupportedFormatError
from swagdoc.core.source_reader import read_source
from swagdoc.core.store import ResourceStore
from swagdoc.models.options import ResolvedOptions, SwaggerOptions
from swagdoc.models.resource import AnnotationBlock, Diagnostic, Fragment
from swagdoc.parsers.base import BaseFormatReader
from swagdoc.parsers.coffeescript_reader import CoffeeScriptReader
from swagdoc.parsers.factory import ReaderFactory
from swagdoc.parsers.javascript_reader import JavaScriptReader
from swagdoc.parsers.yaml_reader import YamlReader

logger = structlog.get_logger(__name__)


@dataclass
class Documentation:
    """Result of one generation pass.

    Attributes:
        options: The resolved options generation ran with.
        store: The frozen resource store.
        descriptor: The whole descriptor (v1 summary or v2 document).
        diagnostics: Every recoverable problem, in the order found.
    """

    options: ResolvedOptions
    store: ResourceStore
    descriptor: dict[str, Any]
    diagnostics: list[Diagnostic] = field(default_factory=list)


def _build_factory() -> ReaderFactory:
    """Create a :class:`ReaderFactory` pre-loaded with all built-in readers.

    Returns:
        A ready-to-use factory instance.

    Raises:
        RuntimeError: If a source format has no reader.
    """
    factory = ReaderFactory()
    factory.register(SourceFormat.JAVASCRIPT, JavaScriptReader)
    factory.register(SourceFormat.YAML, YamlReader)
    factory.register(SourceFormat.COFFEESCRIPT, CoffeeScriptReader)
    missing = factory.missing_formats
    if missing:
        raise RuntimeError(f"No reader registered for: {', '.join(fmt.value for fmt in missing)}")
    return factory


def _extract(reader: BaseFormatReader, file_path: pathlib.Path) -> list[AnnotationBlock]:
    return reader.extract(file_path, read_source(file_path))


async def generate(options: SwaggerOptions | ResolvedOptions | None) -> Documentation:
    """Build the documentation for every configured source file.

    Configuration is validated before any file is read.  Each file is
    read and extracted in a worker thread, but the next file is only
    started once the previous one has been merged.

    Args:
        options: Raw or already resolved generation options.

    Returns:
        A :class:`Documentation` with a frozen store and the built
        descriptor.

    Raises:
        ConfigurationError: If the options are invalid.
        UnsupportedFormatError: If a file has an unrecognized extension.
        FileNotFoundError: If a configured file does not exist.
        AnnotationDecodeError: If an annotation body is not valid YAML.
    """
    resolved = options if isinstance(options, ResolvedOptions) else resolve_options(options)

    logger.info(
        "generation_started",
        files=len(resolved.apis),
        schema_version=resolved.schema_version,
    )
    logger.debug("options_resolved", options=resolved.model_dump(mode="json"))

    factory = _build_factory()
    classifier = FragmentClassifier()
    store = ResourceStore()

    for file_path in resolved.apis:
        try:
            source_format = get_format_for_file(file_path)
        except UnsupportedFormatError:
            logger.error("unsupported_format", file=str(file_path), extension=file_path.suffix)
            raise

        reader = factory.get(source_format)
        blocks = await asyncio.to_thread(_extract, reader, file_path)

        fragments: list[Fragment] = []
        for block in blocks:
            fragments.extend(classifier.classify_block(block, decode_block(block)))

        store.contribute(str(file_path), fragments)
        logger.info(
            "file_processed",
            file=str(file_path),
            format=source_format.value,
            blocks=len(blocks),
            fragments=len(fragments),
        )

    store.freeze()
    result = build_descriptor(resolved, store)

    diagnostics = [*classifier.diagnostics, *store.diagnostics, *result.diagnostics]
    for diagnostic in diagnostics:
        logger.warning(
            diagnostic.kind.value,
            message=diagnostic.message,
            **diagnostic.model_dump(exclude={"kind", "message"}, exclude_none=True),
        )

    logger.info(
        "generation_finished",
        resources=len(store),
        diagnostics=len(diagnostics),
    )
    logger.debug("descriptor_built", descriptor=result.descriptor)

    return Documentation(
        options=resolved,
        store=store,
        descriptor=result.descriptor,
        diagnostics=diagnostics,
    )
