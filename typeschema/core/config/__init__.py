"""Configuration loading and management for typeschema."""

from typeschema.core.config.loader import (
    ConfigLoader,
    apply_logging_config,
    clear_config_cache,
    get_default_config,
    load_config,
)
from typeschema.core.config.models import LoggingConfig, SchemaConfig, TypeSchemaConfig

__all__ = [
    "ConfigLoader",
    "LoggingConfig",
    "SchemaConfig",
    "TypeSchemaConfig",
    "apply_logging_config",
    "clear_config_cache",
    "get_default_config",
    "load_config",
]
