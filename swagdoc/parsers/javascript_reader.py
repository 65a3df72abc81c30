"""Tree-sitter based reader for ``@swagger`` annotations in JavaScript.

Every block comment in the syntax tree is parsed with the JSDoc
annotation parser; each ``@swagger`` annotation body becomes one
:class:`AnnotationBlock`.
"""

from __future__ import annotations

import pathlib

import structlog
import tree_sitter_javascript as tsjavascript
from tree_sitter import Language, Node, Parser

from swagdoc.models.resource import AnnotationBlock, BlockKind
from swagdoc.parsers.base import SWAGGER_TAG, BaseFormatReader
from swagdoc.parsers.jsdoc import parse_comment

logger = structlog.get_logger(__name__)

JS_LANGUAGE = Language(tsjavascript.language())


class JavaScriptReader(BaseFormatReader):
    """Extracts ``@swagger`` blocks from JavaScript block comments.

    Line comments (``//``) are ignored.  Comments inside syntactically
    broken regions are still found because tree-sitter keeps them as
    extras of the error nodes.

    Args:
        tag: Annotation title that marks documentation blocks.
    """

    def __init__(self, tag: str = SWAGGER_TAG) -> None:
        super().__init__(tag)
        self._parser = Parser(JS_LANGUAGE)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def extract(self, file_path: pathlib.Path, source: str) -> list[AnnotationBlock]:
        """Parse JavaScript *source* and return its ``@swagger`` blocks.

        Args:
            file_path: Path of the ``.js`` file.
            source: File text.

        Returns:
            One block per ``@swagger`` annotation, in source order.
        """
        blocks: list[AnnotationBlock] = []
        for comment in self.block_comments(source):
            for tag in parse_comment(comment):
                if tag.title != self.tag:
                    continue
                blocks.append(
                    AnnotationBlock(
                        source_file=str(file_path),
                        raw_body=tag.description,
                        kind=BlockKind.ANNOTATION,
                    )
                )

        logger.debug("annotations_extracted", file=str(file_path), blocks=len(blocks))
        return blocks

    def block_comments(self, source: str) -> list[str]:
        """Return the text of every ``/* ... */`` comment in *source*.

        Args:
            source: JavaScript text.

        Returns:
            Comment texts, delimiters included, in source order.
        """
        tree = self._parser.parse(source.encode("utf-8"))
        comments: list[str] = []
        self._collect_comments(tree.root_node, comments)
        return comments

    # ------------------------------------------------------------------
    # Tree walking
    # ------------------------------------------------------------------

    def _collect_comments(self, node: Node, comments: list[str]) -> None:
        """Depth-first walk accumulating block comment texts.

        Args:
            node: Current tree-sitter node.
            comments: Accumulator.
        """
        if node.type == "comment":
            text = self._node_text(node)
            if text.startswith("/*"):
                comments.append(text)
            return
        for child in node.children:
            self._collect_comments(child, comments)

    @staticmethod
    def _node_text(node: Node) -> str:
        """Decode the UTF-8 text of a tree-sitter node."""
        text: bytes | None = node.text
        if text is None:
            return ""
        return text.decode("utf-8", errors="replace")
