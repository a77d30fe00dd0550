"""Loguru logging for typeschema.

typeschema is a library, so its log records are disabled until the host
application opts in with :func:`configure_logging` (or
:func:`typeschema.core.config.apply_logging_config`). Until then a schema
build writes nothing to stdout or stderr.

Examples
--------
>>> from typeschema.core.logging import get_logger
>>> logger = get_logger(__name__)

Opt in to builder and loader output::

    from typeschema.core.logging import configure_logging
    configure_logging(level="DEBUG", format="rich")
"""

import sys
from contextlib import suppress
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

from loguru import logger
from rich.logging import RichHandler

if TYPE_CHECKING:
    from loguru import Logger

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["console", "json", "structured", "rich", "dual"]

# Records from every typeschema.* module
LOGGER_NAMESPACE = "typeschema"

_CURRENT_CONFIG: dict[str, Any] | None = None
_HANDLER_IDS: list[int] = []

logger.disable(LOGGER_NAMESPACE)


def _console_sinks(
    format: LogFormat, use_color: bool, include_timestamp: bool
) -> list[dict[str, Any]]:
    """Return ``logger.add`` keyword sets for the console side of ``format``."""
    if format in ("rich", "dual"):
        rich_sink = {
            "sink": RichHandler(rich_tracebacks=True, markup=False, show_time=include_timestamp),
            "format": "{message}",
        }
        if format == "rich":
            return [rich_sink]
        return [rich_sink, {"sink": sys.stdout, "serialize": True}]

    if format == "json":
        return [{"sink": sys.stderr, "serialize": True}]

    timestamp = "{time:YYYY-MM-DD HH:mm:ss} " if include_timestamp else ""
    if format == "structured":
        colorize = use_color and sys.stderr.isatty()
        return [
            {
                "sink": sys.stderr,
                "colorize": colorize,
                "format": (
                    f"<green>{timestamp}</green>[<level>{{level: <8}}</level>]"
                    "<cyan>{name}:{function}:{line}</cyan> | <level>{message}</level>"
                ),
            }
        ]

    return [
        {
            "sink": sys.stderr,
            "colorize": False,
            "format": f"{timestamp}{{level: <8}} | {{name}} | {{message}}",
        }
    ]


def configure_logging(
    level: LogLevel = "INFO",
    format: LogFormat = "structured",
    output_file: str | Path | None = None,
    use_color: bool = True,
    include_timestamp: bool = True,
    backtrace: bool = True,
    diagnose: bool = True,
    force_reconfigure: bool = False,
) -> None:
    """Enable typeschema log records and route them to the chosen sinks.

    Calling it again with the same arguments is a no-op. The first call
    replaces loguru's default stderr handler, so records are not printed
    twice.

    Parameters
    ----------
    level : LogLevel, default="INFO"
        Minimum level emitted
    format : LogFormat, default="structured"
        - "console": plain single-line records
        - "json": JSON lines on stderr
        - "structured": colored records with source location
        - "rich": Rich console handler
        - "dual": Rich on stderr plus JSON lines on stdout
    output_file : str | Path | None, default=None
        Also write JSON lines to this file (rotated at 10 MB)
    use_color : bool, default=True
        Color the structured format when stderr is a TTY
    include_timestamp : bool, default=True
        Prefix records with a timestamp
    backtrace, diagnose : bool, default=True
        Loguru exception formatting options
    force_reconfigure : bool, default=False
        Rebuild the sinks even when the arguments are unchanged
    """
    global _CURRENT_CONFIG

    requested = {
        "level": level,
        "format": format,
        "output_file": str(output_file) if output_file else None,
        "use_color": use_color,
        "include_timestamp": include_timestamp,
        "backtrace": backtrace,
        "diagnose": diagnose,
    }
    if not force_reconfigure and requested == _CURRENT_CONFIG:
        return

    if _CURRENT_CONFIG is None:
        # Loguru's default handler
        with suppress(ValueError):
            logger.remove(0)
    for handler_id in _HANDLER_IDS:
        with suppress(ValueError):
            logger.remove(handler_id)
    _HANDLER_IDS.clear()

    sinks = _console_sinks(format, use_color, include_timestamp)
    if output_file:
        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        sinks.append({"sink": path, "serialize": True, "rotation": "10 MB"})

    for options in sinks:
        _HANDLER_IDS.append(
            logger.add(level=level, backtrace=backtrace, diagnose=diagnose, **options)
        )

    logger.enable(LOGGER_NAMESPACE)
    _CURRENT_CONFIG = requested


def disable_logging() -> None:
    """Remove typeschema's sinks and silence its records again."""
    global _CURRENT_CONFIG

    for handler_id in _HANDLER_IDS:
        with suppress(ValueError):
            logger.remove(handler_id)
    _HANDLER_IDS.clear()
    logger.disable(LOGGER_NAMESPACE)
    _CURRENT_CONFIG = None


@lru_cache(maxsize=256)
def get_logger(name: str) -> "Logger":
    """Return the loguru logger bound with ``module=name`` (cached)."""
    return logger.bind(module=name)
