"""Generation options as supplied by the host application.

Keys are accepted in the camelCase spelling used by Swagger UI
configuration files (``swaggerVersion``, ``swaggerJSON`` ...) as well as
by their snake_case field names.
"""

from __future__ import annotations

import pathlib
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class SwaggerOptions(BaseModel):
    """Raw, user-facing generation options.

    Attributes:
        swagger_version: Schema version string; ``"2.0"`` selects v2.
        api_version: v1 ``apiVersion`` field.
        base_path: v1 ``basePath`` field.
        info: v1 ``info`` block.
        descriptor: v2 base document (``info``, ``host``, ``schemes`` ...).
        apis: Ordered source files to scan; order decides first-writer-wins.
        swagger_ui: Directory holding the Swagger UI bundle.
        swagger_url: URL prefix the UI is mounted on.
        swagger_json: URL of the descriptor endpoint.
        full_swagger_json_path: Route path for the descriptor, computed
            from ``swagger_json`` when omitted.
        debug: Log options and descriptors at DEBUG level.
        base_dir: Directory relative paths are resolved against.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    swagger_version: Optional[str] = Field(None, alias="swaggerVersion")
    api_version: Optional[str] = Field(None, alias="apiVersion")
    base_path: Optional[str] = Field(None, alias="basePath")
    info: Optional[dict[str, Any]] = None
    descriptor: Optional[dict[str, Any]] = None
    apis: list[str] = Field(default_factory=list)
    swagger_ui: Optional[str] = Field(None, alias="swaggerUI")
    swagger_url: str = Field("/swagger", alias="swaggerURL")
    swagger_json: str = Field("/api-docs.json", alias="swaggerJSON")
    full_swagger_json_path: Optional[str] = Field(None, alias="fullSwaggerJSONPath")
    debug: bool = False
    base_dir: Optional[pathlib.Path] = Field(None, alias="baseDir")


class ResolvedOptions(BaseModel):
    """Validated options with every computed value filled in."""

    schema_version: str
    generation: int
    api_version: Optional[str] = None
    base_path: Optional[str] = None
    info: Optional[dict[str, Any]] = None
    descriptor: dict[str, Any] = Field(default_factory=dict)
    apis: list[pathlib.Path] = Field(default_factory=list)
    swagger_ui: pathlib.Path
    swagger_url: str
    swagger_json: str
    full_swagger_json_path: str
    debug: bool = False

    @property
    def is_v2(self) -> bool:
        return self.generation == 2
