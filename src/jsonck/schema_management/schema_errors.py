"""Schema resolution and acquisition failures."""

from __future__ import annotations


class SchemaError(Exception):
    """Raised when the schema governing a document cannot be obtained."""


class NoSchemaResolvedError(SchemaError):
    """Raised when neither --schema nor $schema names a schema source."""


class SchemaFileNotFoundError(SchemaError):
    """Raised when a local schema path does not exist."""


class SchemaNotJsonError(SchemaError):
    """Raised when a local schema file is not valid JSON."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Schema file is not valid JSON: {path}")
        self.path = path


class SchemaHttpError(SchemaError):
    """Raised for non-success responses or malformed schema payloads."""

    def __init__(self, source: str, status_code: int, reason: str | None = None) -> None:
        detail = reason or f"HTTP {status_code}"
        super().__init__(f"Failed to download schema from {source}: {detail}")
        self.source = source
        self.status_code = status_code


class SchemaTimeoutError(SchemaError):
    """Raised when a schema download exceeds its timeout."""

    def __init__(self, source: str, timeout_ms: int) -> None:
        super().__init__(f"Schema download timed out after {timeout_ms}ms: {source}")
        self.source = source
        self.timeout_ms = timeout_ms


class SchemaFetchFailedError(SchemaError):
    """Raised for transport-level download failures."""

    def __init__(self, source: str, cause: Exception) -> None:
        super().__init__(f"Failed to download schema from {source}: {cause}")
        self.source = source
        self.cause = cause


class InvalidSchemaError(SchemaError):
    """Raised when the validation engine rejects a schema."""
