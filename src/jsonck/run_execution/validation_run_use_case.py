"""Run execution use-case service."""

from __future__ import annotations

import logging
from typing import TextIO

from jsonck.input_reading import Input, InputError, parse_json, read_input, read_stdin
from jsonck.results_writing import FileResult, ResultReporter
from jsonck.schema_management import (
    SchemaCache,
    SchemaError,
    is_url_source,
    resolve_schema_source,
)
from jsonck.validation import JsonSchemaEngine, ValidationEngine

from .run_contracts import RunOutcome, RunRequest

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when the batch cannot start because inputs cannot be collected."""


def execute_validation_run(
    request: RunRequest,
    *,
    cache: SchemaCache | None = None,
    engine: ValidationEngine | None = None,
    stdin: TextIO | None = None,
) -> RunOutcome:
    """Validate every requested input in order and report the results.

    An empty ``request.files`` reads a single document from standard input.
    Failures while collecting inputs stop the run; failures for one input
    are recorded against that input and the batch continues.
    """
    resolved_cache = (
        cache if cache is not None else SchemaCache(max_entries=request.cache_max_entries)
    )
    resolved_engine = engine if engine is not None else JsonSchemaEngine()
    reporter = ResultReporter(request.output, batch=len(request.files) > 1)

    try:
        inputs = _collect_inputs(request.files, stdin)
    except RunExecutionError as exc:
        _LOGGER.debug("Input collection failed: %s", exc)
        reporter.fatal(str(exc))
        return RunOutcome(
            results=(),
            summary=reporter.summary,
            runtime_error=True,
            fatal_error=str(exc),
        )

    try:
        for item in inputs:
            reporter.record(
                _validate_input(
                    item,
                    request=request,
                    cache=resolved_cache,
                    engine=resolved_engine,
                    reporter=reporter,
                )
            )
    finally:
        if cache is None:
            resolved_cache.close()

    reporter.finish()
    return RunOutcome(
        results=reporter.results,
        summary=reporter.summary,
        runtime_error=any(result.runtime_error for result in reporter.results),
    )


def _collect_inputs(files: tuple[str, ...], stdin: TextIO | None) -> list[Input]:
    try:
        if not files:
            return [read_stdin(stdin)]
        return [read_input(specifier, stdin) for specifier in files]
    except (InputError, OSError, UnicodeDecodeError) as exc:
        raise RunExecutionError(str(exc)) from exc


def _validate_input(
    item: Input,
    *,
    request: RunRequest,
    cache: SchemaCache,
    engine: ValidationEngine,
    reporter: ResultReporter,
) -> FileResult:
    schema_source: str | None = None
    try:
        document = parse_json(item.content, item.name)
        schema_source = resolve_schema_source(document, request.schema)
        if is_url_source(schema_source) and cache.size == 0:
            reporter.progress(f"Downloading schema from {schema_source}...")
        schema = cache.load(schema_source, request.timeout_ms)
        outcome = engine.compile(schema).check(document)
    except (InputError, SchemaError, OSError) as exc:
        _LOGGER.debug("Runtime error for %s: %s", item.name, exc)
        return FileResult.from_runtime_error(item.name, exc, schema_source)

    _LOGGER.debug(
        "%s: %s (%d errors)",
        item.name,
        "valid" if outcome.valid else "invalid",
        len(outcome.violations),
    )
    return FileResult.from_outcome(item.name, schema_source, outcome)
