"""FastAPI route definitions for the descriptor endpoints.

The descriptor path is only known once options are resolved, so routers
are built by :func:`build_descriptor_router` rather than declared at
import time.

- v1: ``GET {path}`` returns the resource listing and
  ``GET {path}/{resource_name}`` the detail of one resource.
- v2: ``GET {path}`` returns the flattened descriptor.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status

from swagdoc.core.service import DescriptorService
from swagdoc.models.options import ResolvedOptions


def get_descriptor_service(request: Request) -> DescriptorService:
    """Return the service installed on ``app.state`` by the lifespan handler.

    Raises:
        HTTPException: 503 if generation has not completed.
    """
    service: DescriptorService | None = getattr(request.app.state, "descriptor_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Documentation has not been generated yet.",
        )
    return service


def build_descriptor_router(options: ResolvedOptions) -> APIRouter:
    """Create the router serving the descriptor for *options*.

    Args:
        options: Resolved options; ``full_swagger_json_path`` and the
            schema generation decide the routes.

    Returns:
        A router ready to be included in the application.
    """
    router = APIRouter()
    json_path = options.full_swagger_json_path

    @router.get(json_path, summary="Whole API descriptor")
    async def whole_descriptor(
        service: DescriptorService = Depends(get_descriptor_service),
    ) -> dict[str, Any]:
        return service.whole_descriptor()

    if options.is_v2:
        return router

    @router.get(json_path.rstrip("/") + "/{resource_name:path}", summary="Resource descriptor")
    async def resource_descriptor(
        resource_name: str,
        service: DescriptorService = Depends(get_descriptor_service),
    ) -> dict[str, Any]:
        """Return one resource's detail, or the listing for an empty name.

        Raises:
            HTTPException: 404 if the resource is unknown.
        """
        if not resource_name:
            return service.whole_descriptor()
        result = service.resource_descriptor(resource_name)
        if result is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Resource not found: {resource_name}",
            )
        return result

    return router
