"""Validation engine exports."""

from .engine_contracts import CompiledSchema, ValidationEngine
from .jsonschema_engine import JsonSchemaEngine, strip_meta_schema
from .validation_outcomes import ValidationOutcome, ValidationViolation

__all__ = [
    "CompiledSchema",
    "JsonSchemaEngine",
    "ValidationEngine",
    "ValidationOutcome",
    "ValidationViolation",
    "strip_meta_schema",
]
