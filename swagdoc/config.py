"""Application-wide configuration and settings.

Process settings use ``pydantic-settings`` so values can be overridden via
environment variables prefixed with ``SWAGDOC_``.  Generation options
(the ``apis`` list, schema version, descriptor ...) live in a YAML file
loaded by :func:`load_options` and are validated by
:func:`resolve_options`.
"""

from __future__ import annotations

import pathlib
from urllib.parse import urlsplit

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings

from swagdoc.core.errors import ConfigurationError
from swagdoc.models.options import ResolvedOptions, SwaggerOptions

DEFAULT_SCHEMA_VERSION = "1.0"


class Settings(BaseSettings):
    """Global settings for the swagdoc server.

    Attributes:
        app_name: Display name of the application.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        options_file: YAML file holding the generation options.
        host: Interface the server binds to.
        port: Port the server listens on.
    """

    app_name: str = "swagdoc"
    log_level: str = "INFO"
    options_file: str = "swagdoc.yml"
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = {"env_prefix": "SWAGDOC_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


def load_options(path: str | pathlib.Path) -> SwaggerOptions:
    """Read generation options from a YAML file.

    Relative ``apis`` and ``swaggerUI`` entries are resolved against the
    file's directory unless the file sets ``baseDir`` itself.

    Args:
        path: Path to the options file.

    Returns:
        The parsed :class:`SwaggerOptions`.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML, or
            does not hold a mapping of valid options.
    """
    options_path = pathlib.Path(path)
    if not options_path.is_file():
        raise ConfigurationError(f"Options file not found: {options_path}")

    try:
        data = yaml.safe_load(options_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid options file {options_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Options file must contain a mapping: {options_path}")

    try:
        options = SwaggerOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid options in {options_path}: {exc}") from exc

    if options.base_dir is None:
        options.base_dir = options_path.resolve().parent
    return options


def schema_generation(version: str) -> int:
    """Return the schema generation encoded by the first character of *version*.

    ``"2.0"`` gives ``2``; anything without a leading digit counts as v1.
    """
    if version and version[0].isdigit():
        return int(version[0])
    return 1


def resolve_options(options: SwaggerOptions | None) -> ResolvedOptions:
    """Validate *options* and compute every derived value.

    Args:
        options: Options supplied by the host application.

    Returns:
        A :class:`ResolvedOptions` ready for generation and routing.

    Raises:
        ConfigurationError: If options are absent, ``swaggerUI`` is not
            set, or a v2 schema is requested without a ``descriptor``.
    """
    if options is None:
        raise ConfigurationError("'options' is required.")
    if not options.swagger_ui:
        raise ConfigurationError("'swaggerUI' is required.")

    descriptor = options.descriptor or {}
    schema_version = (
        options.swagger_version
        or descriptor.get("swaggerVersion")
        or descriptor.get("swagger")
        or DEFAULT_SCHEMA_VERSION
    )
    schema_version = str(schema_version)
    generation = schema_generation(schema_version)

    if generation == 2:
        if not options.descriptor:
            raise ConfigurationError("'descriptor' is required.")
        full_path = options.full_swagger_json_path or urlsplit(options.swagger_json).path
    else:
        full_path = options.full_swagger_json_path or urlsplit(
            (options.base_path or "") + options.swagger_json
        ).path

    base_dir = options.base_dir or pathlib.Path.cwd()

    return ResolvedOptions(
        schema_version=schema_version,
        generation=2 if generation == 2 else 1,
        api_version=options.api_version,
        base_path=options.base_path,
        info=options.info,
        descriptor=descriptor,
        apis=[(base_dir / api).resolve() for api in options.apis],
        swagger_ui=(base_dir / options.swagger_ui).resolve(),
        swagger_url=options.swagger_url.rstrip("/") or "/",
        swagger_json=options.swagger_json,
        full_swagger_json_path=full_path.rstrip("/") or "/",
        debug=options.debug,
    )
