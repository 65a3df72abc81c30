"""FastAPI application factory and lifespan management."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, status
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from swagdoc import __version__
from swagdoc.api.routes import build_descriptor_router
from swagdoc.config import load_options, resolve_options, settings
from swagdoc.core.generation import generate
from swagdoc.core.service import DescriptorService
from swagdoc.logging import setup_logging
from swagdoc.models.options import SwaggerOptions


def create_app(options: SwaggerOptions | None = None) -> FastAPI:
    """Build and return the configured FastAPI application.

    Options are resolved immediately so configuration errors surface
    before the server starts.  Generation itself runs once, in the
    lifespan handler; any error it raises aborts startup.

    Args:
        options: Generation options.  Defaults to the file named by
            ``SWAGDOC_OPTIONS_FILE``.

    Returns:
        A fully wired :class:`FastAPI` instance.
    """
    if options is None:
        options = load_options(settings.options_file)
    resolved = resolve_options(options)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging("DEBUG" if resolved.debug else settings.log_level)
        documentation = await generate(resolved)
        app.state.documentation = documentation
        app.state.descriptor_service = DescriptorService(documentation)
        yield

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Serves API descriptors generated from @swagger annotations.",
        lifespan=lifespan,
        # The generated descriptor replaces FastAPI's own schema and docs.
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )

    swagger_url = resolved.swagger_url

    # Static mounts only match ``{prefix}/...``; send the bare prefix there.
    if swagger_url != "/":

        @app.get(swagger_url, include_in_schema=False)
        async def swagger_ui_redirect() -> RedirectResponse:
            return RedirectResponse(url=swagger_url + "/", status_code=status.HTTP_302_FOUND)

    app.include_router(build_descriptor_router(resolved), tags=["Descriptor"])
    app.mount(
        swagger_url,
        StaticFiles(directory=resolved.swagger_ui, html=True),
        name="swagger-ui",
    )
    return app
