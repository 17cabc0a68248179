"""Configuration domain exports."""

from .loader import ConfigurationError, load_configuration
from .runtime_settings import DEFAULT_TIMEOUT_MS, ValidatorSettings

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "ConfigurationError",
    "ValidatorSettings",
    "load_configuration",
]
