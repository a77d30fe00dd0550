"""TOML configuration loader for typeschema."""

from __future__ import annotations

import dataclasses
import os
import re
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, cast

from typeschema.core.config.models import (
    LoggingConfig,
    OutputFormat,
    SchemaConfig,
    TypeSchemaConfig,
)
from typeschema.core.exceptions import ConfigurationError
from typeschema.core.logging import configure_logging, get_logger

# Constants for boolean environment variable parsing
_TRUTHY_VALUES = frozenset({"true", "1", "yes", "on", "enabled"})
_FALSY_VALUES = frozenset({"false", "0", "no", "off", "disabled"})

CONFIG_FILE_NAMES = ("typeschema.toml", "pyproject.toml", ".typeschema.toml")

logger = get_logger(__name__)


def _parse_bool_env(value: str) -> bool:
    """Parse boolean from environment variable value.

    Parameters
    ----------
    value : str
        Environment variable value

    Returns
    -------
    bool
        Parsed boolean value

    Raises
    ------
    ValueError
        If value is not a recognized boolean string
    """
    normalized = value.lower().strip()
    if normalized in _TRUTHY_VALUES:
        return True
    if normalized in _FALSY_VALUES:
        return False
    expected = _TRUTHY_VALUES | _FALSY_VALUES
    raise ValueError(f"Invalid boolean value: {value!r}. Expected one of: {expected}")


@lru_cache(maxsize=32)
def _load_and_parse_cached(path_str: str) -> TypeSchemaConfig:
    """Cached configuration loader."""
    loader = ConfigLoader()
    return loader._load_and_parse(Path(path_str))


class ConfigLoader:
    """Loads and processes typeschema configuration from TOML files."""

    ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

    def load_from_toml(self, path: str | Path | None = None) -> TypeSchemaConfig:
        """Load configuration from TOML file.

        Parameters
        ----------
        path : str | Path | None
            Path to TOML file. If None, searches for typeschema.toml or pyproject.toml

        Returns
        -------
        TypeSchemaConfig
            Parsed configuration with environment variables substituted
        """
        config_path = self._find_config_file(path)
        return _load_and_parse_cached(str(config_path.absolute()))

    def _load_and_parse(self, config_path: Path) -> TypeSchemaConfig:
        """Load and parse configuration file."""
        logger.info("Loading configuration from {path}", path=config_path)

        with config_path.open("rb") as f:
            data = tomllib.load(f)

        if config_path.name == "pyproject.toml":
            section = data.get("tool", {}).get("typeschema", {})
            if not section:
                logger.warning(
                    "No [tool.typeschema] section found in pyproject.toml, using defaults"
                )
                return self._parse_config({})
        elif "tool" in data and "typeschema" in data.get("tool", {}):
            section = data["tool"]["typeschema"]
        else:
            # Flat format (top-level keys)
            section = data

        section = self._substitute_env_vars(section)
        return self._parse_config(section)

    def _find_config_file(self, path: str | Path | None) -> Path:
        """Find configuration file.

        Raises
        ------
        FileNotFoundError
            If no configuration file is found
        """
        if path:
            config_path = Path(path)
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return config_path

        if env_path := os.getenv("TYPESCHEMA_CONFIG_PATH"):
            config_path = Path(env_path)
            if config_path.exists():
                logger.debug(f"Using config from TYPESCHEMA_CONFIG_PATH: {config_path}")
                return config_path
            logger.warning(f"TYPESCHEMA_CONFIG_PATH set but file not found: {config_path}")

        for name in CONFIG_FILE_NAMES:
            search_path = Path(name)
            if search_path.exists():
                return search_path

        # Also check parent directories for a pyproject.toml carrying our section
        current = Path.cwd()
        while current != current.parent:
            pyproject = current / "pyproject.toml"
            if pyproject.exists():
                with pyproject.open("rb") as f:
                    data = tomllib.load(f)
                if "typeschema" in data.get("tool", {}):
                    return pyproject
            current = current.parent

        raise FileNotFoundError(
            f"No configuration file found. Searched for: {', '.join(CONFIG_FILE_NAMES)}"
        )

    def _substitute_env_vars(self, data: Any) -> Any:
        """Recursively replace ``${VAR}`` placeholders with environment values.

        Missing variables keep their placeholder.
        """
        if isinstance(data, str):

            def replacer(match: re.Match[str]) -> str:
                var_name = match.group(1)
                value = os.environ.get(var_name)
                if value is None:
                    logger.debug(
                        f"Environment variable ${{{var_name}}} not found, keeping placeholder"
                    )
                    return match.group(0)
                return value

            return self.ENV_VAR_PATTERN.sub(replacer, data)

        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}

        if isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]

        return data

    def _parse_config(self, data: dict[str, Any]) -> TypeSchemaConfig:
        """Parse configuration data into TypeSchemaConfig."""
        return TypeSchemaConfig(
            logging=self._parse_logging_config(data.get("logging", {})),
            schema=self._parse_schema_config(data.get("schema", {})),
        )

    def _parse_logging_config(self, logging_data: dict[str, Any]) -> LoggingConfig:
        """Parse logging configuration with environment variable overrides.

        Environment variables take precedence over TOML configuration:
        - TYPESCHEMA_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        - TYPESCHEMA_LOG_FORMAT: Output format (console, json, structured, rich, dual)
        - TYPESCHEMA_LOG_FILE: Optional file path for log output
        - TYPESCHEMA_LOG_COLOR: Use color output (true/false)
        """
        values: dict[str, Any] = {
            key: logging_data[key]
            for key in LoggingConfig.__dataclass_fields__
            if key in logging_data
        }

        if env_level := os.getenv("TYPESCHEMA_LOG_LEVEL"):
            values["level"] = env_level.upper()
            logger.debug(f"Overriding log level from env: {values['level']}")

        if env_format := os.getenv("TYPESCHEMA_LOG_FORMAT"):
            values["format"] = env_format.lower()
            logger.debug(f"Overriding log format from env: {values['format']}")

        if env_file := os.getenv("TYPESCHEMA_LOG_FILE"):
            values["output_file"] = env_file
            logger.debug(f"Overriding log file from env: {env_file}")

        if env_color := os.getenv("TYPESCHEMA_LOG_COLOR"):
            try:
                values["use_color"] = _parse_bool_env(env_color)
                logger.debug(f"Overriding use_color from env: {values['use_color']}")
            except ValueError as e:
                logger.warning(f"Invalid TYPESCHEMA_LOG_COLOR value: {e}")

        return LoggingConfig(**values)

    def _parse_schema_config(self, schema_data: dict[str, Any]) -> SchemaConfig:
        """Parse schema builder options with environment variable overrides.

        - TYPESCHEMA_ENUM_SEPARATOR: Delimiter for enum text
        - TYPESCHEMA_OUTPUT_FORMAT: Default output format (dict, json, yaml)

        Raises
        ------
        ConfigurationError
            If an option has an invalid value
        """
        unknown = set(schema_data) - set(SchemaConfig.__dataclass_fields__)
        if unknown:
            raise ConfigurationError("schema", f"unknown options: {', '.join(sorted(unknown))}")

        values: dict[str, Any] = dict(schema_data)

        if (env_separator := os.getenv("TYPESCHEMA_ENUM_SEPARATOR")) is not None:
            values["enum_separator"] = env_separator
            logger.debug(f"Overriding enum separator from env: {env_separator!r}")

        if env_format := os.getenv("TYPESCHEMA_OUTPUT_FORMAT"):
            values["output_format"] = cast("OutputFormat", env_format.lower())
            logger.debug(f"Overriding output format from env: {values['output_format']}")

        return SchemaConfig(**values)


def load_config(path: str | Path | None = None) -> TypeSchemaConfig:
    """Load configuration from TOML file or return defaults.

    Parameters
    ----------
    path : str | Path | None
        Path to configuration file or None to search

    Returns
    -------
    TypeSchemaConfig
        Loaded configuration, or defaults with environment overrides
        applied if no file is found
    """
    try:
        return ConfigLoader().load_from_toml(path)
    except FileNotFoundError:
        if path:
            raise
        logger.info("No configuration file found, using defaults")
        return ConfigLoader()._parse_config({})


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when configuration files have been modified.
    """
    _load_and_parse_cached.cache_clear()


def get_default_config() -> TypeSchemaConfig:
    """Get default configuration."""
    return TypeSchemaConfig()


def apply_logging_config(config: LoggingConfig) -> None:
    """Configure logging from a LoggingConfig."""
    configure_logging(**dataclasses.asdict(config))
