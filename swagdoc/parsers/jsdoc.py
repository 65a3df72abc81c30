"""Minimal JSDoc-style annotation parser.

Turns a block comment into a list of ``@tag`` annotations, each carrying
the free text that follows it.  Only what extraction needs is supported:
no type expressions, no parameter names, no inline tags.
"""

from __future__ import annotations

import re
import textwrap
from dataclasses import dataclass

_OPENER = re.compile(r"^\s*/\*\*?")
_CLOSER = re.compile(r"\*/\s*$")
_TAG_LINE = re.compile(r"^\s*@(?P<title>[A-Za-z_][\w.-]*)(?:[ \t]+(?P<rest>.*))?$")


@dataclass(frozen=True)
class AnnotationTag:
    """A single ``@title body`` annotation."""

    title: str
    description: str


def unwrap_comment(text: str) -> str:
    """Strip comment delimiters and leading ``*`` gutters from *text*.

    Lines with a ``*`` gutter lose it along with one following space.
    Lines without one only lose their shared indentation so that nested
    YAML stays intact.
    """
    body = _CLOSER.sub("", _OPENER.sub("", text, count=1), count=1)

    starred: dict[int, str] = {}
    bare: dict[int, str] = {}
    lines = body.splitlines()
    for index, line in enumerate(lines):
        stripped = line.lstrip()
        if stripped.startswith("*"):
            rest = stripped[1:]
            if rest[:1] in (" ", "\t"):
                rest = rest[1:]
            starred[index] = rest
        else:
            bare[index] = line

    dedented = textwrap.dedent("\n".join(bare.values())).split("\n") if bare else []
    bare = dict(zip(bare.keys(), dedented))

    merged = [starred[i] if i in starred else bare[i] for i in range(len(lines))]
    return "\n".join(merged).rstrip()


def _clean_body(lines: list[str]) -> str:
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return textwrap.dedent("\n".join(lines))


def parse_comment(text: str, unwrap: bool = True) -> list[AnnotationTag]:
    """Parse a block comment into its ``@tag`` annotations.

    Args:
        text: The comment, delimiters included unless *unwrap* is ``False``.
        unwrap: Whether to strip delimiters and ``*`` gutters first.

    Returns:
        Annotations in source order.  Text before the first tag is
        dropped.
    """
    body = unwrap_comment(text) if unwrap else text

    tags: list[AnnotationTag] = []
    title: str | None = None
    current: list[str] = []

    for line in body.splitlines():
        match = _TAG_LINE.match(line)
        if match:
            if title is not None:
                tags.append(AnnotationTag(title, _clean_body(current)))
            title = match.group("title")
            rest = match.group("rest")
            current = [rest] if rest else []
        elif title is not None:
            current.append(line)

    if title is not None:
        tags.append(AnnotationTag(title, _clean_body(current)))
    return tags
