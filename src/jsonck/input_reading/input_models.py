"""Input reading entities."""

from __future__ import annotations

from dataclasses import dataclass

STDIN_MARKER = "<stdin>"
STDIN_SPECIFIER = "-"


@dataclass(frozen=True)
class Input:
    """One named document awaiting validation."""

    name: str
    content: str
