"""Assembly of the served descriptor from a populated resource store.

Two incompatible schema generations are produced:

- **v1**: a light summary listing every resource, with per-resource
  detail assembled on demand by :func:`build_v1_resource`.
- **v2**: one flattened document whose ``paths`` and ``definitions``
  maps merge every resource.  The first contribution for a
  ``(path, verb)`` pair or a definition name wins; later ones are
  dropped and reported.

All functions here are pure: they neither mutate the store nor log.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from swagdoc.core.store import ResourceStore
from swagdoc.models.options import ResolvedOptions
from swagdoc.models.resource import Diagnostic, DiagnosticKind, ResourceRecord


@dataclass
class BuildResult:
    """A built descriptor together with the collisions met on the way."""

    descriptor: dict[str, Any]
    diagnostics: list[Diagnostic] = field(default_factory=list)


def build_descriptor(options: ResolvedOptions, store: ResourceStore) -> BuildResult:
    """Build the whole descriptor for the configured schema generation.

    Args:
        options: Resolved generation options.
        store: The populated store.

    Returns:
        The v1 summary or the v2 flattened descriptor.
    """
    if options.is_v2:
        return build_v2_descriptor(options, store)
    return BuildResult(descriptor=build_v1_summary(options, store))


# ------------------------------------------------------------------
# v1
# ------------------------------------------------------------------


def _v1_base(options: ResolvedOptions) -> dict[str, Any]:
    base: dict[str, Any] = {
        "swaggerVersion": options.schema_version,
        "apiVersion": options.api_version,
        "basePath": options.base_path,
        "swaggerURL": options.swagger_url,
        "swaggerJSON": options.swagger_json,
    }
    if options.info:
        base["info"] = copy.deepcopy(options.info)
    return {key: value for key, value in base.items() if value is not None}


def build_v1_summary(options: ResolvedOptions, store: ResourceStore) -> dict[str, Any]:
    """Return the v1 resource listing.

    Each entry points at the per-resource endpoint
    (``swaggerJSON + resourcePath``).
    """
    descriptor = _v1_base(options)
    apis: list[dict[str, Any]] = []
    for resource_path in store.resource_paths:
        record = store.get(resource_path)
        entry: dict[str, Any] = {"path": options.swagger_json + resource_path}
        if record is not None and record.description is not None:
            entry["description"] = record.description
        apis.append(entry)
    descriptor["apis"] = apis
    return descriptor


def build_v1_resource(options: ResolvedOptions, record: ResourceRecord) -> dict[str, Any]:
    """Return the v1 detail document for a single resource."""
    descriptor = _v1_base(options)
    descriptor["resourcePath"] = record.resource_path
    descriptor["apis"] = copy.deepcopy(record.api_operations)
    descriptor["models"] = copy.deepcopy(record.models)
    return descriptor


# ------------------------------------------------------------------
# v2
# ------------------------------------------------------------------


def build_v2_descriptor(options: ResolvedOptions, store: ResourceStore) -> BuildResult:
    """Flatten every resource into global ``paths`` and ``definitions`` maps.

    Resources are visited in discovery order.  ``paths`` and
    ``definitions`` already present in the base descriptor count as
    earlier contributions.

    Args:
        options: Resolved v2 options; ``descriptor`` is the base document.
        store: The populated store.

    Returns:
        The descriptor and the collisions that were dropped.
    """
    descriptor = copy.deepcopy(options.descriptor)
    descriptor.setdefault("swagger", options.schema_version)
    descriptor.pop("apis", None)

    paths: dict[str, Any] = dict(descriptor.get("paths") or {})
    definitions: dict[str, Any] = dict(descriptor.get("definitions") or {})
    diagnostics: list[Diagnostic] = []

    for record in store:
        for operation in record.api_operations:
            _fold_operation(paths, operation, record, diagnostics)

        for name, schema in record.models.items():
            if name in definitions:
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.DEFINITION_COLLISION,
                        message=f"API definition {name} is already defined !",
                        resource_path=record.resource_path,
                        name=name,
                    )
                )
                continue
            definitions[name] = copy.deepcopy(schema)

    descriptor["paths"] = paths
    descriptor["definitions"] = definitions
    return BuildResult(descriptor=descriptor, diagnostics=diagnostics)


def _fold_operation(
    paths: dict[str, Any],
    operation: dict[str, Any],
    record: ResourceRecord,
    diagnostics: list[Diagnostic],
) -> None:
    """Merge one ``path -> verb -> schema`` fragment into *paths*."""
    for path, verbs in operation.items():
        if not isinstance(verbs, dict):
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.MALFORMED_OPERATION,
                    message=f"API {path} does not map verbs to operations",
                    resource_path=record.resource_path,
                    path=str(path),
                )
            )
            continue

        slot = paths.setdefault(path, {})
        for verb, schema in verbs.items():
            if verb in slot:
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.PATH_COLLISION,
                        message=f"API {path} [{str(verb).upper()}] is already defined !",
                        resource_path=record.resource_path,
                        path=str(path),
                        verb=str(verb),
                    )
                )
                continue
            slot[verb] = copy.deepcopy(schema)
