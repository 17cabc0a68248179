"""Capability interface for validation engines."""

from __future__ import annotations

from typing import Any, Protocol

from .validation_outcomes import ValidationOutcome


class CompiledSchema(Protocol):
    """A schema prepared for repeated checks."""

    def check(self, document: Any) -> ValidationOutcome:
        """Report every violation of the schema in ``document``."""


class ValidationEngine(Protocol):
    """Turns a schema into a reusable checker."""

    def compile(self, schema: Any) -> CompiledSchema:
        """Prepare ``schema`` or raise InvalidSchemaError."""
