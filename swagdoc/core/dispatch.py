"""Format dispatch by file extension.

The set of formats is closed: every :class:`SourceFormat` must have a
reader registered with the :class:`~swagdoc.parsers.factory.ReaderFactory`.
"""

from __future__ import annotations

import enum
import pathlib

from swagdoc.core.errors import UnsupportedFormatError


class SourceFormat(str, enum.Enum):
    """Source formats that may carry API documentation."""

    JAVASCRIPT = "javascript"
    YAML = "yaml"
    COFFEESCRIPT = "coffeescript"


# Map file extensions to the formats understood by the reader factory.
EXTENSION_FORMAT_MAP: dict[str, SourceFormat] = {
    ".js": SourceFormat.JAVASCRIPT,
    ".yml": SourceFormat.YAML,
    ".coffee": SourceFormat.COFFEESCRIPT,
}


def get_format_for_file(path: pathlib.Path) -> SourceFormat:
    """Return the source format for a file based on its extension.

    Args:
        path: File path to inspect.

    Returns:
        The matching :class:`SourceFormat`.

    Raises:
        UnsupportedFormatError: If the extension is not recognized.
    """
    source_format = EXTENSION_FORMAT_MAP.get(path.suffix.lower())
    if source_format is None:
        raise UnsupportedFormatError(path)
    return source_format
