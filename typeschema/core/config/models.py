"""Configuration data models for typeschema."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from typeschema.core.exceptions import ConfigurationError

OutputFormat = Literal["dict", "json", "yaml"]

OUTPUT_FORMATS: tuple[str, ...] = ("dict", "json", "yaml")


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging configuration for typeschema.

    Attributes
    ----------
    level : str, default="INFO"
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    format : str, default="structured"
        Output format (console, json, structured, rich, dual)
    output_file : str | None, default=None
        Optional file path to write logs to
    use_color : bool, default=True
        Use ANSI color codes (auto-disabled for non-TTY)
    include_timestamp : bool, default=True
        Include timestamp in log output
    backtrace : bool, default=True
        Enable backtrace for debugging (disable in production for security)
    diagnose : bool, default=True
        Enable diagnose mode with variable values (disable in production for security)

    Examples
    --------
    TOML configuration:

    ```toml
    [tool.typeschema.logging]
    level = "DEBUG"
    format = "rich"
    ```

    Environment variable overrides:

    ```bash
    export TYPESCHEMA_LOG_LEVEL=DEBUG
    export TYPESCHEMA_LOG_FORMAT=json
    ```
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "structured", "dual", "rich"] = "structured"
    output_file: str | None = None
    use_color: bool = True
    include_timestamp: bool = True
    backtrace: bool = True
    diagnose: bool = True


@dataclass(frozen=True, slots=True)
class SchemaConfig:
    """Schema builder options.

    Attributes
    ----------
    enum_separator : str, default=","
        Delimiter splitting enum text into tokens
    output_format : OutputFormat, default="dict"
        Rendering used by ``generate_schema`` when no format is passed
    json_indent : int | None, default=2
        Indentation of JSON output; ``None`` renders a single line

    Examples
    --------
    ```toml
    [tool.typeschema.schema]
    enum_separator = "|"
    output_format = "yaml"
    ```
    """

    enum_separator: str = ","
    output_format: OutputFormat = "dict"
    json_indent: int | None = 2

    def __post_init__(self) -> None:
        if not self.enum_separator:
            raise ConfigurationError("schema", "enum_separator must not be empty")
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                "schema",
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got {self.output_format!r}",
            )
        if self.json_indent is not None and self.json_indent < 0:
            raise ConfigurationError("schema", "json_indent must not be negative")


@dataclass(slots=True)
class TypeSchemaConfig:
    """Complete typeschema configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    schema: SchemaConfig = field(default_factory=SchemaConfig)
