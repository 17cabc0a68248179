"""Validation outcome entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationViolation:
    """One constraint violation located by a JSON Pointer into the document."""

    path: str
    message: str


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of checking one document against one schema."""

    violations: tuple[ValidationViolation, ...]

    @property
    def valid(self) -> bool:
        """Return True when no violations were reported."""
        return not self.violations
