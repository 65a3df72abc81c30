"""Tests for the JSDoc annotation parser."""

from swagdoc.parsers.jsdoc import parse_comment, unwrap_comment


class TestUnwrapComment:
    def test_strips_delimiters_and_star_gutter(self):
        comment = "/**\n * first\n *   indented\n */"
        assert unwrap_comment(comment) == "\nfirst\n  indented"

    def test_plain_block_comment(self):
        assert unwrap_comment("/* just text */") == "just text"

    def test_starless_lines_keep_relative_indentation(self):
        comment = "/*\n    @swagger\n    /pets:\n      get:\n        summary: x\n  */"
        assert unwrap_comment(comment).splitlines()[1:] == [
            "@swagger",
            "/pets:",
            "  get:",
            "    summary: x",
        ]


class TestParseComment:
    def test_single_swagger_tag(self):
        comment = "/**\n * @swagger\n * /pets:\n *   get:\n *     summary: List pets\n */"
        tags = parse_comment(comment)

        assert len(tags) == 1
        assert tags[0].title == "swagger"
        assert tags[0].description == "/pets:\n  get:\n    summary: List pets"

    def test_description_before_first_tag_is_dropped(self):
        comment = "/**\n * Lists all pets.\n *\n * @returns {Array} pets\n */"
        tags = parse_comment(comment)

        assert [tag.title for tag in tags] == ["returns"]
        assert tags[0].description == "{Array} pets"

    def test_multiple_tags_split_bodies(self):
        comment = (
            "/**\n"
            " * @param {string} name\n"
            " * @swagger\n"
            " * resourcePath: /pets\n"
            " * @deprecated\n"
            " */"
        )
        tags = parse_comment(comment)

        assert [tag.title for tag in tags] == ["param", "swagger", "deprecated"]
        assert tags[1].description == "resourcePath: /pets"
        assert tags[2].description == ""

    def test_inline_body_on_tag_line(self):
        tags = parse_comment("/** @swagger resourcePath: /inline */")
        assert tags[0].description == "resourcePath: /inline"

    def test_comment_without_tags(self):
        assert parse_comment("/* nothing to see */") == []

    def test_already_unwrapped_text(self):
        tags = parse_comment("@swagger\nresourcePath: /raw", unwrap=False)
        assert tags[0].description == "resourcePath: /raw"
