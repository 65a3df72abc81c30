"""Tests for YAML decoding of annotation blocks."""

import pytest

from swagdoc.core.decoder import decode_block
from swagdoc.core.errors import AnnotationDecodeError
from swagdoc.models.resource import AnnotationBlock, BlockKind


def _block(body: str, kind: BlockKind = BlockKind.ANNOTATION) -> AnnotationBlock:
    return AnnotationBlock(source_file="api.js", raw_body=body, kind=kind)


class TestDecodeBlock:
    def test_single_document(self):
        assert decode_block(_block("resourcePath: /pet")) == [{"resourcePath": "/pet"}]

    def test_multi_document_body(self):
        body = "resourcePath: /pet\n---\n/pet:\n  get:\n    summary: List\n"
        assert decode_block(_block(body)) == [
            {"resourcePath": "/pet"},
            {"/pet": {"get": {"summary": "List"}}},
        ]

    def test_empty_documents_are_dropped(self):
        assert decode_block(_block("---\n---\na: 1\n")) == [{"a": 1}]

    def test_malformed_body_is_fatal(self):
        with pytest.raises(AnnotationDecodeError) as excinfo:
            decode_block(_block("/pet: [unclosed"))
        assert excinfo.value.source == "api.js"

    def test_declarative_body_is_single_document(self):
        block = _block("resourcePath: /pet\n", BlockKind.DECLARATIVE)
        assert decode_block(block) == [{"resourcePath": "/pet"}]

    def test_declarative_body_rejects_several_documents(self):
        block = _block("a: 1\n---\nb: 2\n", BlockKind.DECLARATIVE)
        with pytest.raises(AnnotationDecodeError):
            decode_block(block)
