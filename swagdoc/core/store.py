"""Accumulator of resource records across all processed files.

The store has a two-phase lifecycle: it is *populating* while
generation feeds it one file at a time through :meth:`contribute`, and
*frozen* once :meth:`freeze` is called.  A frozen store only answers
queries; any further contribution raises :class:`StoreFrozenError`.

Resource identity is assigned by the first header that declares a path.
Later headers for the same path re-enter the existing record, so the
operations and models they bring are appended to it rather than
replacing it.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Sequence

import structlog

from swagdoc.core.errors import StoreFrozenError
from swagdoc.models.resource import (
    Diagnostic,
    DiagnosticKind,
    Fragment,
    ModelsFragment,
    OperationFragment,
    ResourceHeader,
    ResourceRecord,
)

logger = structlog.get_logger(__name__)


class ResourceStore:
    """Ordered mapping from resource path to :class:`ResourceRecord`.

    Records are kept in discovery order.  Anonymous records (files that
    never declared a header) are part of that order but have no key.
    """

    def __init__(self) -> None:
        self._records: dict[str, ResourceRecord] = {}
        self._ordered: list[ResourceRecord] = []
        self._diagnostics: list[Diagnostic] = []
        self._frozen = False

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, resource_path: str) -> Optional[ResourceRecord]:
        """Return the record for *resource_path*, or ``None``."""
        return self._records.get(resource_path)

    def __contains__(self, resource_path: object) -> bool:
        return resource_path in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ResourceRecord]:
        return iter(list(self._ordered))

    @property
    def resource_paths(self) -> list[str]:
        """Declared resource paths in discovery order."""
        return list(self._records)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def freeze(self) -> "ResourceStore":
        """End the populating phase and return the store."""
        self._frozen = True
        logger.debug("store_frozen", resources=len(self._records), records=len(self._ordered))
        return self

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def contribute(self, source: str, fragments: Sequence[Fragment]) -> None:
        """Fold the fragments of one file into the store.

        Fragments attach to the resource most recently declared in the
        same file.  Fragments seen before the file's first header are
        held back and folded into that header's record; if the file
        declares no header at all they become an anonymous record.

        Args:
            source: The file the fragments came from.
            fragments: Classified fragments in file order.

        Raises:
            StoreFrozenError: If the store has been frozen.
        """
        if self._frozen:
            raise StoreFrozenError(f"Cannot contribute {source}: resource store is frozen")

        current: Optional[ResourceRecord] = None
        pending = ResourceRecord()

        for fragment in fragments:
            if isinstance(fragment, ResourceHeader):
                current = self._declare(fragment, source)
                if not pending.is_empty():
                    self._absorb(current, pending, source)
                    pending = ResourceRecord()
            else:
                self._apply(current if current is not None else pending, fragment, source)

        if not pending.is_empty():
            pending.sources.append(source)
            self._ordered.append(pending)
            self._report(
                DiagnosticKind.ORPHAN_FRAGMENTS,
                f"{source} declares no resourcePath; its fragments form an anonymous resource",
                source=source,
            )

    def _declare(self, header: ResourceHeader, source: str) -> ResourceRecord:
        record = self._records.get(header.resource_path)
        if record is None:
            record = ResourceRecord(
                resource_path=header.resource_path,
                description=header.description,
                sources=[source],
            )
            self._records[header.resource_path] = record
            self._ordered.append(record)
            logger.debug("resource_declared", resource=header.resource_path, file=source)
            return record

        if header.description:
            if not record.description:
                record.description = header.description
            elif record.description != header.description:
                self._report(
                    DiagnosticKind.DESCRIPTION_CONFLICT,
                    f"Resource {header.resource_path} is already described; "
                    f"ignoring description from {source}",
                    source=source,
                    resource_path=header.resource_path,
                )
        self._add_source(record, source)
        return record

    def _apply(self, record: ResourceRecord, fragment: Fragment, source: str) -> None:
        if isinstance(fragment, OperationFragment):
            record.api_operations.append(fragment.operation)
        elif isinstance(fragment, ModelsFragment):
            self._merge_models(record, fragment.models, source)
        if not record.is_anonymous:
            self._add_source(record, source)

    def _absorb(self, record: ResourceRecord, pending: ResourceRecord, source: str) -> None:
        record.api_operations.extend(pending.api_operations)
        self._merge_models(record, pending.models, source)

    def _merge_models(self, record: ResourceRecord, models: dict[str, Any], source: str) -> None:
        for name, schema in models.items():
            if name in record.models:
                self._report(
                    DiagnosticKind.MODEL_COLLISION,
                    f"Model {name} is already defined for resource {record.resource_path}",
                    source=source,
                    resource_path=record.resource_path,
                    name=name,
                )
                continue
            record.models[name] = schema

    @staticmethod
    def _add_source(record: ResourceRecord, source: str) -> None:
        if source not in record.sources:
            record.sources.append(source)

    def _report(self, kind: DiagnosticKind, message: str, **context: Any) -> None:
        self._diagnostics.append(Diagnostic(kind=kind, message=message, **context))
