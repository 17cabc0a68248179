"""Schema management exports."""

from .schema_cache import SchemaCache, is_url_source
from .schema_errors import (
    InvalidSchemaError,
    NoSchemaResolvedError,
    SchemaError,
    SchemaFetchFailedError,
    SchemaFileNotFoundError,
    SchemaHttpError,
    SchemaNotJsonError,
    SchemaTimeoutError,
)
from .schema_resolution import resolve_schema_source

__all__ = [
    "InvalidSchemaError",
    "NoSchemaResolvedError",
    "SchemaCache",
    "SchemaError",
    "SchemaFetchFailedError",
    "SchemaFileNotFoundError",
    "SchemaHttpError",
    "SchemaNotJsonError",
    "SchemaTimeoutError",
    "is_url_source",
    "resolve_schema_source",
]
