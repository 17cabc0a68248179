"""Validation engine backed by the jsonschema library."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from jsonschema import Draft202012Validator, FormatChecker
from jsonschema import exceptions as jsonschema_exceptions
from referencing.exceptions import Unresolvable

from jsonck.schema_management.schema_errors import InvalidSchemaError

from .validation_outcomes import ValidationOutcome, ValidationViolation


def strip_meta_schema(schema: Any) -> Any:
    """Return the schema without its top-level `$schema` declaration.

    The cached schema object is left untouched.
    """
    if isinstance(schema, Mapping) and "$schema" in schema:
        return {key: value for key, value in schema.items() if key != "$schema"}
    return schema


class _CompiledJsonSchema:
    def __init__(self, validator: Draft202012Validator) -> None:
        self._validator = validator

    def check(self, document: Any) -> ValidationOutcome:
        try:
            violations = tuple(
                ValidationViolation(
                    path=_json_pointer(error.absolute_path),
                    message=error.message,
                )
                for error in self._validator.iter_errors(document)
            )
        except Unresolvable as exc:
            raise InvalidSchemaError(f"Schema reference could not be resolved: {exc}") from exc
        except RecursionError as exc:
            raise InvalidSchemaError(
                "Validation exceeded the maximum nesting depth"
            ) from exc
        return ValidationOutcome(violations=violations)


class JsonSchemaEngine:
    """Draft 2020-12 engine collecting every violation with format checks enabled."""

    def __init__(self) -> None:
        self._format_checker = FormatChecker()

    def compile(self, schema: Any) -> _CompiledJsonSchema:
        normalized = strip_meta_schema(schema)
        try:
            Draft202012Validator.check_schema(normalized)
        except jsonschema_exceptions.SchemaError as exc:
            raise InvalidSchemaError(f"Schema is not a valid JSON Schema: {exc.message}") from exc
        return _CompiledJsonSchema(
            Draft202012Validator(normalized, format_checker=self._format_checker)
        )


def _json_pointer(parts: Iterable[Any]) -> str:
    return "".join(
        "/" + str(part).replace("~", "~0").replace("/", "~1") for part in parts
    )
