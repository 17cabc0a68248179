"""Schema source resolution."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .schema_errors import NoSchemaResolvedError


def resolve_schema_source(document: Any, schema_flag: str | None = None) -> str:
    """Return the schema source for a document; an explicit flag always wins."""
    if schema_flag:
        return schema_flag

    if isinstance(document, Mapping):
        declared = document.get("$schema")
        if isinstance(declared, str) and declared:
            return declared

    raise NoSchemaResolvedError(
        "No $schema property found in file and no --schema flag provided. "
        "Use --schema <path-or-url> to specify one."
    )
