"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import (
    CONFIG_ENV_VAR,
    ConfigurationError,
    load_configuration,
    resolve_configuration_path,
)
from .runtime_settings import (
    FILE_BACKEND,
    OUTPUT_BACKENDS,
    PORT_BACKEND,
    Configuration,
    LoggingSettings,
    OutputSettings,
)

__all__ = [
    "Configuration",
    "LoggingSettings",
    "OutputSettings",
    "PORT_BACKEND",
    "FILE_BACKEND",
    "OUTPUT_BACKENDS",
    "CONFIG_ENV_VAR",
    "ConfigurationError",
    "load_configuration",
    "resolve_configuration_path",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
