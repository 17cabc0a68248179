"""Result accumulation and rendering."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from typing import Any

import click

from .report_models import BatchSummary, FileResult, OutputMode

ROOT_PATH_LABEL = "<root>"
FATAL_RECORD_NAME = "-"


def summarize(results: Sequence[FileResult]) -> BatchSummary:
    """Tally results; totals always match the result count."""
    valid = sum(1 for result in results if result.valid)
    return BatchSummary(total=len(results), valid=valid, invalid=len(results) - valid)


def build_envelope(results: Sequence[FileResult], error: str | None = None) -> dict[str, Any]:
    """Build the structured batch envelope."""
    envelope: dict[str, Any] = {
        "results": [result.to_dict() for result in results],
        "summary": summarize(results).to_dict(),
    }
    if error is not None:
        envelope["error"] = error
    return envelope


class ResultReporter:
    """Collect results in input order and render them for one output mode.

    Text and plain modes stream each result as it is recorded. JSON mode
    buffers everything and writes a single envelope from ``finish``. Quiet
    mode writes nothing.
    """

    def __init__(self, mode: OutputMode, *, batch: bool = False) -> None:
        self.mode = mode
        self.batch = batch
        self._results: list[FileResult] = []

    @property
    def results(self) -> tuple[FileResult, ...]:
        return tuple(self._results)

    @property
    def summary(self) -> BatchSummary:
        return summarize(self._results)

    def record(self, result: FileResult) -> None:
        """Append one result and emit its streamed form."""
        self._results.append(result)
        if self.mode is OutputMode.TEXT:
            self._write_text(result)
        elif self.mode is OutputMode.PLAIN:
            self._write_plain(result)

    def progress(self, message: str) -> None:
        """Show a progress note on an interactive stderr in text mode."""
        if self.mode is OutputMode.TEXT and sys.stderr.isatty():
            click.echo(message, err=True)

    def finish(self) -> None:
        """Flush buffered output at the end of the batch."""
        if self.mode is OutputMode.JSON:
            click.echo(json.dumps(build_envelope(self._results), indent=2))

    def fatal(self, message: str) -> None:
        """Report an error that stopped the run before any validation."""
        if self.mode is OutputMode.JSON:
            click.echo(json.dumps(build_envelope(self._results, error=message), indent=2))
        elif self.mode is OutputMode.PLAIN:
            click.echo(_tsv(FATAL_RECORD_NAME, "error", message))
        elif self.mode is OutputMode.TEXT:
            click.echo(f"Error: {message}", err=True)

    def _write_text(self, result: FileResult) -> None:
        prefix = f"{result.file}: " if self.batch else ""
        if result.runtime_error:
            click.echo(f"{prefix}Error: {result.errors[0].message}", err=True)
        elif result.valid:
            click.echo(f"{prefix}Valid")
        else:
            click.echo(f"{prefix}Invalid", err=True)
            for error in result.errors:
                click.echo(f"{prefix}  {error.path or ROOT_PATH_LABEL}: {error.message}", err=True)

    def _write_plain(self, result: FileResult) -> None:
        if result.runtime_error:
            click.echo(_tsv(result.file, "error", result.errors[0].message))
        elif result.valid:
            click.echo(_tsv(result.file, "valid", result.schema or ""))
        else:
            for error in result.errors:
                click.echo(_tsv(result.file, "invalid", error.path, error.message))


def _tsv(*fields: str) -> str:
    return "\t".join(_flatten_field(field) for field in fields)


def _flatten_field(value: str) -> str:
    return value.replace("\t", " ").replace("\r", " ").replace("\n", " ")
