"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass

from jsonck.results_writing.report_models import OutputMode

DEFAULT_TIMEOUT_MS = 30000


@dataclass(frozen=True)
class ValidatorSettings:
    """Defaults applied to a run before command-line overrides."""

    schema: str | None = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    output: OutputMode = OutputMode.TEXT
    cache_max_entries: int | None = None
