"""Document reading and strict JSON parsing."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, TextIO

from .input_models import STDIN_MARKER, STDIN_SPECIFIER, Input


class InputError(Exception):
    """Raised when a document cannot be read or parsed."""


class InputNotFoundError(InputError):
    """Raised when a document path does not exist."""


class MalformedInputError(InputError):
    """Raised when document content is not valid JSON."""


def is_stdin_piped(stream: TextIO | None = None) -> bool:
    """Return True when standard input is not an interactive terminal."""
    stream = stream if stream is not None else sys.stdin
    if stream is None:
        return False
    return not stream.isatty()


def read_stdin(stream: TextIO | None = None) -> Input:
    """Buffer standard input until end-of-stream."""
    stream = stream if stream is not None else sys.stdin
    return Input(name=STDIN_MARKER, content=stream.read())


def read_input(specifier: str, stream: TextIO | None = None) -> Input:
    """Resolve a file path or `-` into a named input."""
    if specifier == STDIN_SPECIFIER:
        return read_stdin(stream)

    path = Path(specifier).resolve()
    if not path.exists():
        raise InputNotFoundError(f"File not found: {specifier}")
    return Input(name=specifier, content=path.read_text(encoding="utf-8"))


def parse_json(content: str, source_name: str) -> Any:
    """Parse strict JSON, rejecting NaN and Infinity literals."""
    try:
        return json.loads(content, parse_constant=_reject_constant)
    except ValueError as exc:
        raise MalformedInputError(
            f"Failed to parse JSON from {source_name}: invalid syntax"
        ) from exc
    except RecursionError as exc:
        raise MalformedInputError(
            f"Failed to parse JSON from {source_name}: nesting too deep"
        ) from exc


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {token}")
