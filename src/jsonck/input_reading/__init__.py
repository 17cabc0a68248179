"""Input reading exports."""

from .input_models import STDIN_MARKER, Input
from .input_reader import (
    InputError,
    InputNotFoundError,
    MalformedInputError,
    is_stdin_piped,
    parse_json,
    read_input,
    read_stdin,
)

__all__ = [
    "STDIN_MARKER",
    "Input",
    "InputError",
    "InputNotFoundError",
    "MalformedInputError",
    "is_stdin_piped",
    "parse_json",
    "read_input",
    "read_stdin",
]
