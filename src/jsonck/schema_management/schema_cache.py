"""Run-scoped schema acquisition cache."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

import requests

from .schema_errors import (
    SchemaFetchFailedError,
    SchemaFileNotFoundError,
    SchemaHttpError,
    SchemaNotJsonError,
    SchemaTimeoutError,
)

_LOGGER = logging.getLogger(__name__)

_URL_PREFIXES = ("http://", "https://")
_CHUNK_SIZE = 8192


def is_url_source(source: str) -> bool:
    """Return True when the schema source is an absolute HTTP(S) URL."""
    return source.startswith(_URL_PREFIXES)


class SchemaCache:
    """Acquire schemas by source string, at most once per source.

    Keys are compared by exact string equality, so two spellings of the same
    file are two entries. With ``max_entries`` unset the cache never evicts and
    lives as long as the run; a positive bound drops the oldest entry first.
    Returned schemas are shared and must not be mutated by callers.
    """

    def __init__(
        self,
        *,
        max_entries: int | None = None,
        session: requests.Session | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be greater than zero.")
        self._entries: dict[str, Any] = {}
        self._max_entries = max_entries
        self._session = session
        self._clock = clock

    @property
    def size(self) -> int:
        """Number of distinct sources currently held."""
        return len(self._entries)

    def __contains__(self, source: object) -> bool:
        return source in self._entries

    def load(self, source: str, timeout_ms: int) -> Any:
        """Return the schema for ``source``, acquiring it on first use."""
        if source in self._entries:
            _LOGGER.debug("Schema cache hit: %s", source)
            return self._entries[source]

        if is_url_source(source):
            schema = self._fetch_schema(source, timeout_ms)
        else:
            schema = _load_local_schema(source)

        self._store(source, schema)
        return schema

    def close(self) -> None:
        """Release the HTTP session if one was opened."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def _store(self, source: str, schema: Any) -> None:
        if self._max_entries is not None and len(self._entries) >= self._max_entries:
            oldest = next(iter(self._entries))
            _LOGGER.debug("Evicting cached schema: %s", oldest)
            del self._entries[oldest]
        self._entries[source] = schema

    def _fetch_schema(self, url: str, timeout_ms: int) -> Any:
        _LOGGER.debug("Downloading schema from %s", url)
        if self._session is None:
            self._session = requests.Session()
        deadline = self._clock() + timeout_ms / 1000
        try:
            response = self._session.get(url, timeout=timeout_ms / 1000, stream=True)
            try:
                if not response.ok:
                    raise SchemaHttpError(url, response.status_code)
                body = self._read_body(response, url, timeout_ms, deadline)
            finally:
                response.close()
        except requests.Timeout as exc:
            raise SchemaTimeoutError(url, timeout_ms) from exc
        except requests.RequestException as exc:
            raise SchemaFetchFailedError(url, exc) from exc

        try:
            schema = json.loads(body)
        except ValueError as exc:
            raise SchemaHttpError(
                url, response.status_code, reason="response body is not valid JSON"
            ) from exc

        _LOGGER.debug("Schema downloaded successfully: %s", url)
        return schema

    def _read_body(
        self, response: requests.Response, url: str, timeout_ms: int, deadline: float
    ) -> bytes:
        # The requests timeout bounds each socket read; the deadline bounds the whole body.
        chunks: list[bytes] = []
        for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
            if self._clock() > deadline:
                raise SchemaTimeoutError(url, timeout_ms)
            chunks.append(chunk)
        return b"".join(chunks)


def _load_local_schema(source: str) -> Any:
    _LOGGER.debug("Loading local schema: %s", source)
    path = Path(source)
    if not path.exists():
        raise SchemaFileNotFoundError(f"Schema file not found: {source}")

    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise SchemaNotJsonError(source) from exc
