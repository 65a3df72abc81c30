"""End-to-end tests for the generation pass."""

import json

import pytest

from swagdoc.core.errors import (
    AnnotationDecodeError,
    ConfigurationError,
    StoreFrozenError,
    UnsupportedFormatError,
)
from swagdoc.models.resource import DiagnosticKind, ResourceHeader

PET_JS = """\
    /**
     * @swagger
     * resourcePath: /pet
     * description: Everything about pets
     */

    /**
     * @swagger
     * /pet:
     *   get:
     *     summary: List pets
     *     responses:
     *       '200':
     *         description: ok
     */
    exports.list = function () {};

    /**
     * @swagger
     * models:
     *   Pet:
     *     properties:
     *       name:
     *         type: string
     */
"""

USER_ONE_JS = """\
    /**
     * @swagger
     * resourcePath: /users
     * ---
     * /user:
     *   post:
     *     summary: first
     */
"""

USER_TWO_JS = """\
    /**
     * @swagger
     * resourcePath: /accounts
     */

    /**
     * @swagger
     * /user:
     *   post:
     *     summary: second
     */
"""

PET_A_YML = """\
    resourcePath: /pet
    description: Pets
    apis:
      /pet:
        get:
          summary: List pets
"""

PET_B_YML = """\
    resourcePath: /pet
    models:
      Pet:
        properties:
          id:
            type: integer
"""

COFFEE = """\
    ###*
     * @swagger
     * resourcePath: /brew
    ###

    ###*
     * @swagger
     * /brew:
     *   put:
     *     summary: Brew
    ###
    brew = -> 1
"""


class TestScenarios:
    def test_declarative_files_share_one_record(self, write_source, make_options, run_generation):
        a = write_source("A.yml", PET_A_YML)
        b = write_source("B.yml", PET_B_YML)

        docs = run_generation(make_options([a, b]))

        assert docs.store.resource_paths == ["/pet"]
        record = docs.store.get("/pet")
        assert record.api_operations == [{"/pet": {"get": {"summary": "List pets"}}}]
        assert record.models["Pet"] == {"properties": {"id": {"type": "integer"}}}
        assert record.description == "Pets"

    def test_first_writer_wins_across_files(self, write_source, make_v2_options, run_generation):
        one = write_source("one.js", USER_ONE_JS)
        two = write_source("two.js", USER_TWO_JS)

        docs = run_generation(make_v2_options([one, two]))

        assert docs.descriptor["paths"]["/user"]["post"]["summary"] == "first"
        collisions = [d for d in docs.diagnostics if d.kind is DiagnosticKind.PATH_COLLISION]
        assert len(collisions) == 1

        reversed_docs = run_generation(make_v2_options([two, one]))
        assert reversed_docs.descriptor["paths"]["/user"]["post"]["summary"] == "second"

    def test_keys_equal_declared_resource_paths(self, write_source, make_v2_options, run_generation):
        files = [
            write_source("pet.js", PET_JS),
            write_source("one.js", USER_ONE_JS),
            write_source("two.js", USER_TWO_JS),
            write_source("A.yml", PET_A_YML),
            write_source("brew.coffee", COFFEE),
            write_source("health.js", "/**\n * @swagger\n * /health:\n *   get: {}\n */\n"),
        ]

        docs = run_generation(make_v2_options(files))

        assert set(docs.store.resource_paths) == {"/pet", "/users", "/accounts", "/brew"}
        assert "/health" in docs.descriptor["paths"]
        assert docs.descriptor["paths"]["/brew"]["put"]["summary"] == "Brew"

    def test_generation_is_idempotent(self, write_source, make_v2_options, run_generation):
        files = [
            write_source("pet.js", PET_JS),
            write_source("one.js", USER_ONE_JS),
            write_source("two.js", USER_TWO_JS),
            write_source("B.yml", PET_B_YML),
        ]
        options = make_v2_options(files)

        first = run_generation(options).descriptor
        second = run_generation(options).descriptor

        for key in ("paths", "definitions"):
            assert json.dumps(first[key]) == json.dumps(second[key])

    def test_redeclared_header_keeps_first_description(self, write_source, make_options, run_generation):
        a = write_source("a.js", "/**\n * @swagger\n * resourcePath: /pet\n * description: First\n */\n")
        b = write_source("b.js", "/**\n * @swagger\n * resourcePath: /pet\n * description: Second\n */\n")

        docs = run_generation(make_options([a, b]))

        assert docs.store.get("/pet").description == "First"
        assert docs.descriptor["apis"] == [{"path": "/api-docs.json/pet", "description": "First"}]
        assert [d.kind for d in docs.diagnostics] == [DiagnosticKind.DESCRIPTION_CONFLICT]


class TestSchemaSwitch:
    def test_v1_returns_apis_summary(self, write_source, make_options, run_generation):
        docs = run_generation(make_options([write_source("pet.js", PET_JS)], swaggerVersion="1.0"))

        assert docs.descriptor["apis"] == [
            {"path": "/api-docs.json/pet", "description": "Everything about pets"}
        ]
        assert "paths" not in docs.descriptor
        assert "definitions" not in docs.descriptor

    def test_v2_returns_paths_and_definitions(self, write_source, make_v2_options, run_generation):
        docs = run_generation(make_v2_options([write_source("pet.js", PET_JS)]))

        assert docs.descriptor["swagger"] == "2.0"
        assert docs.descriptor["info"]["title"] == "Pet API"
        assert docs.descriptor["paths"]["/pet"]["get"]["responses"] == {"200": {"description": "ok"}}
        assert "Pet" in docs.descriptor["definitions"]
        assert "apis" not in docs.descriptor

    def test_default_schema_version(self, make_options, run_generation):
        docs = run_generation(make_options([]))

        assert docs.options.schema_version == "1.0"
        assert docs.descriptor["apis"] == []


class TestFailures:
    def test_missing_swagger_ui(self, make_options, run_generation):
        with pytest.raises(ConfigurationError):
            run_generation(make_options([], swaggerUI=None))

    def test_v2_requires_descriptor(self, make_options, run_generation):
        with pytest.raises(ConfigurationError):
            run_generation(make_options([], swaggerVersion="2.0"))

    def test_options_required(self, run_generation):
        with pytest.raises(ConfigurationError):
            run_generation(None)

    def test_unsupported_extension(self, write_source, make_options, run_generation):
        good = write_source("pet.js", PET_JS)
        bad = write_source("pet.ts", "// nothing")

        with pytest.raises(UnsupportedFormatError) as excinfo:
            run_generation(make_options([good, bad]))
        assert excinfo.value.path.name == "pet.ts"

    def test_missing_file(self, tmp_path, make_options, run_generation):
        with pytest.raises(FileNotFoundError):
            run_generation(make_options([tmp_path / "absent.js"]))

    def test_malformed_annotation_body(self, write_source, make_options, run_generation):
        broken = write_source("broken.js", "/**\n * @swagger\n * /pet: [unclosed\n */\n")

        with pytest.raises(AnnotationDecodeError) as excinfo:
            run_generation(make_options([broken]))
        assert excinfo.value.source.endswith("broken.js")

    def test_store_is_frozen_after_generation(self, write_source, make_options, run_generation):
        docs = run_generation(make_options([write_source("pet.js", PET_JS)]))

        with pytest.raises(StoreFrozenError):
            docs.store.contribute("late.js", [ResourceHeader(resource_path="/late")])
