"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from jsonck.configuration.runtime_settings import DEFAULT_TIMEOUT_MS
from jsonck.results_writing.report_models import BatchSummary, FileResult, OutputMode


class ExitCode(IntEnum):
    """Process exit codes."""

    ALL_VALID = 0
    INVALID = 1
    RUNTIME_ERROR = 2


@dataclass(frozen=True)
class RunRequest:
    """Input contract for validating one batch of documents."""

    files: tuple[str, ...]
    schema: str | None = None
    output: OutputMode = OutputMode.TEXT
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    cache_max_entries: int | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed batch."""

    results: tuple[FileResult, ...]
    summary: BatchSummary
    runtime_error: bool
    fatal_error: str | None = None

    @property
    def exit_code(self) -> ExitCode:
        """Runtime errors take precedence over invalid documents."""
        if self.runtime_error or self.fatal_error is not None:
            return ExitCode.RUNTIME_ERROR
        if all(result.valid for result in self.results):
            return ExitCode.ALL_VALID
        return ExitCode.INVALID
