"""Tests for logging configuration using Loguru."""

import json
from dataclasses import dataclass
from pathlib import Path

import pytest
from loguru import logger

import typeschema.core.logging as logging_module
from typeschema.core.config import LoggingConfig, apply_logging_config
from typeschema.core.logging import configure_logging, disable_logging, get_logger
from typeschema.core.schema import build_schema


@dataclass
class Person:
    name: str
    age: int


@pytest.fixture
def reset_logging():
    """Restore the silent default around a test."""
    disable_logging()
    yield
    disable_logging()


class TestGetLogger:
    """Test get_logger function."""

    def test_get_logger_caches_results(self):
        """Test that get_logger caches logger instances."""
        assert get_logger("test.cache") is get_logger("test.cache")


@pytest.mark.usefixtures("reset_logging")
class TestSilentByDefault:
    """Test that the library writes nothing until logging is configured."""

    def test_build_leaves_stderr_empty(self, capfd):
        """Test a record build prints nothing with the default setup."""
        build_schema(Person)
        captured = capfd.readouterr()
        assert captured.err == ""
        assert captured.out == ""

    def test_disabled_records_skip_sinks(self):
        """Test records from typeschema modules do not reach any sink."""
        messages: list[str] = []
        handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            build_schema(Person)
        finally:
            logger.remove(handler_id)
        assert messages == []


@pytest.mark.usefixtures("reset_logging")
class TestConfigureLogging:
    """Test configure_logging function."""

    @pytest.mark.parametrize("format", ["console", "json", "structured", "rich", "dual"])
    def test_formats_add_handlers(self, format):
        """Test each format installs at least one handler."""
        configure_logging(level="INFO", format=format)
        assert logging_module._HANDLER_IDS
        assert len(logging_module._HANDLER_IDS) == (2 if format == "dual" else 1)

    def test_idempotent(self):
        """Test that repeated identical configuration adds no handlers."""
        configure_logging(level="INFO", format="console")
        handler_ids = list(logging_module._HANDLER_IDS)
        configure_logging(level="INFO", format="console")
        assert logging_module._HANDLER_IDS == handler_ids

    def test_force_reconfigure_replaces_handlers(self):
        """Test that forced reconfiguration does not accumulate handlers."""
        configure_logging(level="INFO", format="console")
        configure_logging(level="INFO", format="console", force_reconfigure=True)
        assert len(logging_module._HANDLER_IDS) == 1

    def test_build_is_logged_once_enabled(self, capfd):
        """Test configuring logging enables the builder's debug records."""
        configure_logging(level="DEBUG", format="console", include_timestamp=False)
        build_schema(Person)
        assert "Building object schema for Person (2 fields)" in capfd.readouterr().err

    def test_file_output(self, tmp_path: Path):
        """Test records are written as JSON lines to a file."""
        log_file = tmp_path / "logs" / "typeschema.log"
        configure_logging(level="DEBUG", format="json", output_file=log_file)
        build_schema(Person)
        logger.complete()

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert any("Person" in record["text"] for record in records)

    def test_apply_logging_config(self):
        """Test a LoggingConfig is applied as configure_logging arguments."""
        apply_logging_config(LoggingConfig(level="WARNING", format="json"))
        assert logging_module._CURRENT_CONFIG["level"] == "WARNING"
        assert logging_module._CURRENT_CONFIG["format"] == "json"

    def test_disable_logging_silences_again(self, capfd):
        """Test disable_logging removes sinks and silences records."""
        configure_logging(level="DEBUG", format="console")
        disable_logging()
        build_schema(Person)
        assert logging_module._HANDLER_IDS == []
        assert capfd.readouterr().err == ""
