"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, load_schema_config
from .runtime_settings import (
    OUTPUT_FORMATS,
    Configuration,
    OutputSettings,
    ResolutionSettings,
    SchemaConfig,
)

__all__ = [
    "Configuration",
    "OutputSettings",
    "ResolutionSettings",
    "SchemaConfig",
    "OUTPUT_FORMATS",
    "ConfigurationError",
    "load_configuration",
    "load_schema_config",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
