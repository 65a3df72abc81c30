"""Source file reading with graceful encoding fallback."""

from __future__ import annotations

import pathlib
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)

# Encodings to attempt in order when reading source files.
_ENCODING_CHAIN: tuple[str, ...] = ("utf-8", "latin-1", "cp1252")


def read_source(file_path: pathlib.Path) -> str:
    """Read the full text of *file_path*, trying several encodings.

    Args:
        file_path: Absolute path to the source file.

    Returns:
        The decoded file content.

    Raises:
        FileNotFoundError: If *file_path* does not exist.
    """
    if not file_path.is_file():
        raise FileNotFoundError(f"Source file not found: {file_path}")

    content: Optional[str] = None
    used_encoding: str = _ENCODING_CHAIN[0]

    for encoding in _ENCODING_CHAIN:
        try:
            with file_path.open("r", encoding=encoding, buffering=8192) as fh:
                content = fh.read()
            used_encoding = encoding
            break
        except (UnicodeDecodeError, UnicodeError):
            continue

    if content is None:
        logger.warning(
            "encoding_fallback",
            file=str(file_path),
            tried=_ENCODING_CHAIN,
        )
        content = file_path.read_bytes().decode("utf-8", errors="replace")
        used_encoding = "utf-8(replace)"

    logger.debug(
        "source_read",
        file=str(file_path),
        chars=len(content),
        encoding=used_encoding,
    )
    return content
