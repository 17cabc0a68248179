"""Validation engine tests."""

from __future__ import annotations

import pytest
from jsonck.schema_management import InvalidSchemaError
from jsonck.validation import JsonSchemaEngine, ValidationViolation, strip_meta_schema

PERSON_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "age": {"type": "integer", "minimum": 0, "maximum": 150},
        "email": {"type": "string", "format": "email"},
    },
    "required": ["name", "email"],
    "additionalProperties": False,
}


def test_valid_document_has_no_violations() -> None:
    outcome = JsonSchemaEngine().compile(PERSON_SCHEMA).check(
        {"name": "Ada", "age": 36, "email": "ada@example.com"}
    )

    assert outcome.valid is True
    assert outcome.violations == ()


def test_all_independent_violations_are_reported_together() -> None:
    outcome = JsonSchemaEngine().compile(PERSON_SCHEMA).check(
        {"name": 42, "age": 200, "nickname": "x"}
    )

    assert outcome.valid is False
    assert len(outcome.violations) >= 4
    paths = {violation.path for violation in outcome.violations}
    assert "/name" in paths
    assert "/age" in paths
    messages = " ".join(violation.message for violation in outcome.violations)
    assert "'email' is a required property" in messages
    assert "nickname" in messages


def test_document_wide_violation_has_empty_path() -> None:
    outcome = JsonSchemaEngine().compile({"type": "object"}).check([1, 2])

    assert outcome.violations == (
        ValidationViolation(path="", message="[1, 2] is not of type 'object'"),
    )


def test_nested_paths_are_json_pointers() -> None:
    schema = {
        "type": "object",
        "properties": {
            "items": {"type": "array", "items": {"type": "integer"}},
            "a/b": {"type": "string"},
        },
    }

    outcome = JsonSchemaEngine().compile(schema).check({"items": [1, "two"], "a/b": 3})

    paths = sorted(violation.path for violation in outcome.violations)
    assert paths == ["/a~1b", "/items/1"]


@pytest.mark.parametrize(
    ("schema_format", "value"),
    [
        ("email", "not-an-email"),
        ("date", "2024-13-45"),
        ("ipv4", "999.1.1.1"),
        ("uri", "not a uri"),
        ("uri-reference", "\\bad uri"),
        ("date-time", "yesterday"),
        ("time", "25:99"),
        ("duration", "P1Q"),
    ],
)
def test_format_keywords_are_enforced(schema_format: str, value: str) -> None:
    outcome = JsonSchemaEngine().compile({"type": "string", "format": schema_format}).check(value)

    assert outcome.valid is False
    assert schema_format in outcome.violations[0].message


def test_strip_meta_schema_leaves_cached_schema_untouched() -> None:
    schema = {"$schema": "https://json-schema.org/draft/2020-12/schema", "type": "object"}

    stripped = strip_meta_schema(schema)

    assert stripped == {"type": "object"}
    assert "$schema" in schema


def test_strip_meta_schema_passes_through_non_objects() -> None:
    assert strip_meta_schema(True) is True


def test_unknown_meta_schema_declaration_does_not_block_compile() -> None:
    schema = {"$schema": "https://example.com/custom-dialect", "type": "integer"}

    outcome = JsonSchemaEngine().compile(schema).check(3)

    assert outcome.valid is True


def test_invalid_schema_is_rejected_on_compile() -> None:
    with pytest.raises(InvalidSchemaError) as exc_info:
        JsonSchemaEngine().compile({"type": "no-such-type"})

    assert "not a valid JSON Schema" in str(exc_info.value)


def test_unresolvable_reference_is_reported_as_invalid_schema() -> None:
    compiled = JsonSchemaEngine().compile({"$ref": "#/$defs/missing"})

    with pytest.raises(InvalidSchemaError):
        compiled.check({})


def test_nesting_beyond_recursion_limit_is_reported_as_invalid_schema() -> None:
    document: list = []
    for _ in range(5000):
        document = [document]
    compiled = JsonSchemaEngine().compile({"type": "array", "items": {"$ref": "#"}})

    with pytest.raises(InvalidSchemaError, match="nesting depth"):
        compiled.check(document)
