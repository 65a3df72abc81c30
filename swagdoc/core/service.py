"""Read-only query surface over a finished generation pass."""

from __future__ import annotations

import copy
from typing import Any, Optional

from swagdoc.core.builder import build_v1_resource
from swagdoc.core.generation import Documentation


class DescriptorService:
    """Answers descriptor queries for the routing layer.

    The underlying store is frozen, so queries are plain reads and may be
    served concurrently.  Every query returns a fresh copy.

    Args:
        documentation: Result of :func:`~swagdoc.core.generation.generate`.
    """

    def __init__(self, documentation: Documentation) -> None:
        self._documentation = documentation

    @property
    def is_v2(self) -> bool:
        return self._documentation.options.is_v2

    def whole_descriptor(self) -> dict[str, Any]:
        """Return the v1 summary or the v2 flattened descriptor."""
        return copy.deepcopy(self._documentation.descriptor)

    def resource_descriptor(self, name: str) -> Optional[dict[str, Any]]:
        """Return the v1 detail for resource *name*.

        Args:
            name: Resource path with or without its leading ``/``.

        Returns:
            The resource document, or ``None`` if no resource has that path.
        """
        resource_path = name if name.startswith("/") else "/" + name
        record = self._documentation.store.get(resource_path)
        if record is None:
            return None
        return build_v1_resource(self._documentation.options, record)
