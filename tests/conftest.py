"""Configuration file for pytest containing shared fixtures.

- builder: a SchemaBuilder with default options
- clean_env: removes TYPESCHEMA_* environment variables for the test
"""

from collections.abc import Iterator

import pytest

from typeschema.core.config import clear_config_cache
from typeschema.core.schema import SchemaBuilder

TYPESCHEMA_ENV_VARS = (
    "TYPESCHEMA_CONFIG_PATH",
    "TYPESCHEMA_LOG_LEVEL",
    "TYPESCHEMA_LOG_FORMAT",
    "TYPESCHEMA_LOG_FILE",
    "TYPESCHEMA_LOG_COLOR",
    "TYPESCHEMA_ENUM_SEPARATOR",
    "TYPESCHEMA_OUTPUT_FORMAT",
)


@pytest.fixture
def builder() -> SchemaBuilder:
    """Fixture that provides a builder with default options."""
    return SchemaBuilder()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Fixture that clears typeschema environment overrides and the config cache."""
    for name in TYPESCHEMA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_config_cache()
    yield monkeypatch
    clear_config_cache()
