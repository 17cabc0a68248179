"""Settings file loader."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from jsonck.results_writing.report_models import OutputMode

from .runtime_settings import DEFAULT_TIMEOUT_MS, ValidatorSettings


class ConfigurationError(Exception):
    """Raised when the settings file is invalid."""


def load_configuration(config_path: Path | str | None) -> ValidatorSettings:
    """Load settings from a YAML file; no path means built-in defaults."""
    if config_path is None:
        return ValidatorSettings()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return ValidatorSettings(
        schema=_optional_string(parsed.get("schema"), "schema"),
        timeout_ms=_require_positive_int(
            parsed.get("timeout_ms", DEFAULT_TIMEOUT_MS), "timeout_ms"
        ),
        output=_parse_output_mode(parsed.get("output", OutputMode.TEXT.value)),
        cache_max_entries=_parse_cache_section(parsed.get("cache")),
    )


def _parse_output_mode(value: Any) -> OutputMode:
    if not isinstance(value, str):
        raise ConfigurationError("output must be a string.")
    try:
        return OutputMode(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(mode.value for mode in OutputMode)
        raise ConfigurationError(f"output must be one of: {choices}.") from exc


def _parse_cache_section(value: Any) -> int | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ConfigurationError("cache must be a mapping.")
    max_entries = value.get("max_entries", 0)
    if isinstance(max_entries, bool) or not isinstance(max_entries, int):
        raise ConfigurationError("cache.max_entries must be an integer.")
    if max_entries < 0:
        raise ConfigurationError("cache.max_entries must not be negative.")
    return max_entries or None


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
