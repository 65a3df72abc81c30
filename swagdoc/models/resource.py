"""Data models for annotation blocks, classified fragments and resources.

Fragments are a tagged union discriminated by ``kind`` so the merge
logic never has to probe for optional fields itself.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field


class BlockKind(str, enum.Enum):
    """How an :class:`AnnotationBlock` body must be decoded."""

    ANNOTATION = "annotation"
    DECLARATIVE = "declarative"


class AnnotationBlock(BaseModel):
    """A raw ``@swagger`` body (or a whole declarative file) awaiting decoding.

    Attributes:
        source_file: Path of the file the block was extracted from.
        raw_body: The undecoded YAML text.
        kind: ``ANNOTATION`` bodies may hold several ``---`` documents;
            ``DECLARATIVE`` bodies are a single resource document.
    """

    source_file: str = Field(..., description="File the block was extracted from.")
    raw_body: str = Field(..., description="Undecoded YAML text.")
    kind: BlockKind = Field(BlockKind.ANNOTATION, description="Decoding strategy.")


class FragmentKind(str, enum.Enum):
    """Classification of a decoded fragment."""

    HEADER = "header"
    MODELS = "models"
    OPERATION = "operation"


class ResourceHeader(BaseModel):
    """Declares (or re-enters) a resource by path."""

    kind: Literal[FragmentKind.HEADER] = FragmentKind.HEADER
    resource_path: str
    description: Optional[str] = None


class ModelsFragment(BaseModel):
    """Model schemas to merge into the current resource."""

    kind: Literal[FragmentKind.MODELS] = FragmentKind.MODELS
    models: dict[str, Any] = Field(default_factory=dict)


class OperationFragment(BaseModel):
    """A ``path -> verb -> operation`` mapping (or a v1 api object)."""

    kind: Literal[FragmentKind.OPERATION] = FragmentKind.OPERATION
    operation: dict[str, Any] = Field(default_factory=dict)


Fragment = Annotated[
    Union[ResourceHeader, ModelsFragment, OperationFragment],
    Field(discriminator="kind"),
]


class ResourceRecord(BaseModel):
    """Accumulated documentation for one resource path.

    ``resource_path`` is ``None`` for anonymous records: contributions
    from a file that never declared a resource header.

    Attributes:
        resource_path: Identity of the resource, assigned once.
        description: First non-empty description declared for the resource.
        api_operations: Operation fragments in discovery order.
        models: Model name to schema, first writer wins.
        sources: Files that contributed to this record, in order.
    """

    resource_path: Optional[str] = Field(None, description="Resource identity.")
    description: Optional[str] = Field(None, description="Resource description.")
    api_operations: list[dict[str, Any]] = Field(
        default_factory=list, description="Operation fragments in discovery order."
    )
    models: dict[str, Any] = Field(default_factory=dict, description="Model schemas.")
    sources: list[str] = Field(default_factory=list, description="Contributing files.")

    @property
    def is_anonymous(self) -> bool:
        return self.resource_path is None

    def is_empty(self) -> bool:
        """Return ``True`` if nothing has been contributed yet."""
        return not self.api_operations and not self.models


class DiagnosticKind(str, enum.Enum):
    """Non-fatal problems found while merging."""

    PATH_COLLISION = "path_collision"
    DEFINITION_COLLISION = "definition_collision"
    MODEL_COLLISION = "model_collision"
    DESCRIPTION_CONFLICT = "description_conflict"
    ORPHAN_FRAGMENTS = "orphan_fragments"
    MALFORMED_FRAGMENT = "malformed_fragment"
    MALFORMED_OPERATION = "malformed_operation"


class Diagnostic(BaseModel):
    """A recoverable merge problem, reported instead of raised."""

    kind: DiagnosticKind
    message: str
    source: Optional[str] = None
    resource_path: Optional[str] = None
    path: Optional[str] = None
    verb: Optional[str] = None
    name: Optional[str] = None
