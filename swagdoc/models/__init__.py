"""Pydantic v2 data models for fragments, resources and options."""

from swagdoc.models.options import ResolvedOptions, SwaggerOptions
from swagdoc.models.resource import (
    AnnotationBlock,
    BlockKind,
    Diagnostic,
    DiagnosticKind,
    Fragment,
    FragmentKind,
    ModelsFragment,
    OperationFragment,
    ResourceHeader,
    ResourceRecord,
)

__all__ = [
    "AnnotationBlock",
    "BlockKind",
    "Diagnostic",
    "DiagnosticKind",
    "Fragment",
    "FragmentKind",
    "ModelsFragment",
    "OperationFragment",
    "ResourceHeader",
    "ResourceRecord",
    "ResolvedOptions",
    "SwaggerOptions",
]
