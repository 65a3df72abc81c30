"""Shared fixtures: source files on disk and option builders."""

import asyncio
import pathlib
import textwrap

import pytest

from swagdoc.core.generation import generate
from swagdoc.models.options import SwaggerOptions

V2_DESCRIPTOR = {
    "swagger": "2.0",
    "info": {"title": "Pet API", "description": "All about pets", "version": "0.1.0"},
    "host": "localhost:3000",
    "schemes": ["http"],
    "basePath": "/",
}


@pytest.fixture
def ui_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    directory = tmp_path / "ui"
    directory.mkdir()
    (directory / "index.html").write_text("<html>swagger ui</html>", encoding="utf-8")
    return directory


@pytest.fixture
def write_source(tmp_path: pathlib.Path):
    """Write a dedented source file under ``tmp_path`` and return its path."""

    def _write(name: str, content: str) -> pathlib.Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_options(tmp_path: pathlib.Path, ui_dir: pathlib.Path):
    """Build :class:`SwaggerOptions` from camelCase keys."""

    def _make(apis, **overrides) -> SwaggerOptions:
        data = {
            "swaggerUI": str(ui_dir),
            "apis": [str(api) for api in apis],
            "baseDir": str(tmp_path),
        }
        data.update(overrides)
        return SwaggerOptions.model_validate(data)

    return _make


@pytest.fixture
def make_v2_options(make_options):
    def _make(apis, **overrides) -> SwaggerOptions:
        return make_options(apis, descriptor=dict(V2_DESCRIPTOR), **overrides)

    return _make


@pytest.fixture
def run_generation():
    def _run(options):
        return asyncio.run(generate(options))

    return _run
