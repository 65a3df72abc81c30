"""Classification of decoded documents into typed fragments.

A decoded document is one of:

- a **resource header**: it carries a non-empty ``resourcePath``;
- a **models fragment**: it carries ``models`` or ``definitions``;
- a **path-operation fragment**: anything else that is a mapping.

Declarative files are expanded into a header followed by their
operations and models so that they flow through the same merge as
annotations.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog

from swagdoc.models.resource import (
    AnnotationBlock,
    BlockKind,
    Diagnostic,
    DiagnosticKind,
    Fragment,
    ModelsFragment,
    OperationFragment,
    ResourceHeader,
)

logger = structlog.get_logger(__name__)


def _normalize_models(models: Any) -> Optional[dict[str, Any]]:
    """Flatten a ``models`` value into a single mapping.

    A list of mappings is merged left to right.  Returns ``None`` when
    the value has neither shape.
    """
    if isinstance(models, dict):
        return dict(models)
    if isinstance(models, list):
        merged: dict[str, Any] = {}
        for item in models:
            if not isinstance(item, dict):
                return None
            merged.update(item)
        return merged
    return None


def _normalize_operations(apis: Any) -> Optional[list[dict[str, Any]]]:
    """Turn an ``apis``/``paths`` value into a list of operation mappings.

    A mapping becomes one single-key mapping per path, in order.
    """
    if isinstance(apis, dict):
        return [{path: verbs} for path, verbs in apis.items()]
    if isinstance(apis, list):
        if not all(isinstance(item, dict) for item in apis):
            return None
        return list(apis)
    return None


def _description(document: dict[str, Any]) -> Optional[str]:
    value = document.get("description")
    return None if value is None else str(value)


class FragmentClassifier:
    """Turns decoded documents into :data:`Fragment` values.

    Documents that cannot be classified are skipped and recorded in
    :attr:`diagnostics`.
    """

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def classify_block(self, block: AnnotationBlock, documents: list[Any]) -> list[Fragment]:
        """Classify every document decoded from *block*.

        Args:
            block: The block the documents were decoded from.
            documents: Output of :func:`~swagdoc.core.decoder.decode_block`.

        Returns:
            Fragments in document order.
        """
        fragments: list[Fragment] = []
        for document in documents:
            if block.kind is BlockKind.DECLARATIVE:
                fragments.extend(self.classify_declarative(document, block.source_file))
            else:
                fragment = self.classify(document, block.source_file)
                if fragment is not None:
                    fragments.append(fragment)
        return fragments

    def classify(self, document: Any, source: str) -> Optional[Fragment]:
        """Classify one annotation document.

        Args:
            document: A decoded YAML document.
            source: File the document came from.

        Returns:
            The fragment, or ``None`` if *document* is unusable.
        """
        if not isinstance(document, dict):
            self._malformed(source, f"expected a mapping, got {type(document).__name__}")
            return None

        resource_path = document.get("resourcePath")
        if resource_path:
            return ResourceHeader(
                resource_path=str(resource_path),
                description=_description(document),
            )

        if "models" in document or "definitions" in document:
            raw = document.get("models")
            if raw is None:
                raw = document.get("definitions")
            models = _normalize_models({} if raw is None else raw)
            if models is None:
                self._malformed(source, "'models'/'definitions' must be a mapping or a list of mappings")
                return None
            return ModelsFragment(models=models)

        return OperationFragment(operation=document)

    def classify_declarative(self, document: Any, source: str) -> list[Fragment]:
        """Expand a declarative resource document into fragments.

        The header (when ``resourcePath`` is set) comes first so that the
        operations and models that follow attach to it.

        Args:
            document: The decoded file content.
            source: The declarative file path.

        Returns:
            Header, operation and models fragments in that order.
        """
        if not isinstance(document, dict):
            self._malformed(source, f"declarative file must be a mapping, got {type(document).__name__}")
            return []

        fragments: list[Fragment] = []
        resource_path = document.get("resourcePath")
        if resource_path:
            fragments.append(
                ResourceHeader(
                    resource_path=str(resource_path),
                    description=_description(document),
                )
            )

        apis = document.get("apis") or document.get("paths")
        if apis:
            operations = _normalize_operations(apis)
            if operations is None:
                self._malformed(source, "'apis'/'paths' must be a mapping or a list of mappings")
            else:
                fragments.extend(OperationFragment(operation=op) for op in operations)

        raw_models = document.get("models") or document.get("definitions")
        if raw_models:
            models = _normalize_models(raw_models)
            if models is None:
                self._malformed(source, "'models'/'definitions' must be a mapping or a list of mappings")
            else:
                fragments.append(ModelsFragment(models=models))

        return fragments

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _malformed(self, source: str, reason: str) -> None:
        self.diagnostics.append(
            Diagnostic(
                kind=DiagnosticKind.MALFORMED_FRAGMENT,
                message=f"Skipped fragment in {source}: {reason}",
                source=source,
            )
        )
