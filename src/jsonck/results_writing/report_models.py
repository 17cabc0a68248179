"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from jsonck.validation.validation_outcomes import ValidationOutcome, ValidationViolation


class OutputMode(str, Enum):
    """Rendering style for validation results."""

    TEXT = "text"
    JSON = "json"
    PLAIN = "plain"
    QUIET = "quiet"


@dataclass(frozen=True)
class FileResult:
    """Outcome for one input."""

    file: str
    valid: bool
    errors: tuple[ValidationViolation, ...]
    schema: str | None = None
    runtime_error: bool = False

    @staticmethod
    def from_outcome(file: str, schema: str | None, outcome: ValidationOutcome) -> FileResult:
        return FileResult(
            file=file,
            valid=outcome.valid,
            errors=outcome.violations,
            schema=schema,
        )

    @staticmethod
    def from_runtime_error(file: str, error: Exception, schema: str | None = None) -> FileResult:
        return FileResult(
            file=file,
            valid=False,
            errors=(ValidationViolation(path="", message=str(error)),),
            schema=schema,
            runtime_error=True,
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"file": self.file, "valid": self.valid}
        if self.schema is not None:
            payload["schema"] = self.schema
        payload["errors"] = [
            {"path": error.path, "message": error.message} for error in self.errors
        ]
        return payload


@dataclass(frozen=True)
class BatchSummary:
    """Counts derived from a list of results."""

    total: int
    valid: int
    invalid: int

    def to_dict(self) -> dict[str, int]:
        return {"total": self.total, "valid": self.valid, "invalid": self.invalid}
