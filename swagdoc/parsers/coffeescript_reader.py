"""Reader for ``@swagger`` annotations in CoffeeScript sources.

CoffeeScript block comments (``### ... ###``) are the only constructs
that survive compilation as JavaScript comments, so compilation is
reduced to translating them into ``/* ... */`` comments.  The result is
handed to :class:`JavaScriptReader` unchanged.
"""

from __future__ import annotations

import pathlib
import re

import structlog

from swagdoc.models.resource import AnnotationBlock
from swagdoc.parsers.base import SWAGGER_TAG, BaseFormatReader
from swagdoc.parsers.javascript_reader import JavaScriptReader

logger = structlog.get_logger(__name__)

# ``####`` starts a line comment, not a block comment.
_BLOCK_COMMENT = re.compile(r"^[ \t]*###(?!#)(?P<body>[\s\S]*?)###", re.MULTILINE)


def compile_block_comments(source: str) -> str:
    """Translate CoffeeScript block comments into a JavaScript program.

    ``###*`` becomes ``/**``; any other ``###`` becomes ``/*``.

    Args:
        source: CoffeeScript text.

    Returns:
        JavaScript text consisting of the translated comments only.
    """
    compiled: list[str] = []
    for match in _BLOCK_COMMENT.finditer(source):
        body = match.group("body").replace("*/", "* /")
        compiled.append(f"/*{body}*/")
    return "\n\n".join(compiled) + ("\n" if compiled else "")


class CoffeeScriptReader(BaseFormatReader):
    """Extracts ``@swagger`` blocks from CoffeeScript block comments.

    Args:
        tag: Annotation title that marks documentation blocks.
    """

    def __init__(self, tag: str = SWAGGER_TAG) -> None:
        super().__init__(tag)
        self._javascript = JavaScriptReader(tag)

    def extract(self, file_path: pathlib.Path, source: str) -> list[AnnotationBlock]:
        """Compile *source* and extract from the resulting JavaScript.

        Args:
            file_path: Path of the ``.coffee`` file.
            source: File text.

        Returns:
            One block per ``@swagger`` annotation, in source order.
        """
        compiled = compile_block_comments(source)
        logger.debug("coffeescript_compiled", file=str(file_path), chars=len(compiled))
        return self._javascript.extract(file_path, compiled)
