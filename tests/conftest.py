"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from solid_guide.config.defaults import get_default_config, DefaultConfig
from solid_guide.config.loader import ConfigLoader
from solid_guide.logging import configure_logging
from solid_guide.principles import single_responsibility as srp


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Keep structlog off stdout so document output can be asserted exactly."""
    configure_logging(level="WARNING")


@pytest.fixture
def default_config() -> DefaultConfig:
    """Default configuration."""
    return get_default_config()


@pytest.fixture
def empty_config_dir(tmp_path: Path) -> Path:
    """Config directory without a guide.yaml."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def loader(empty_config_dir: Path) -> ConfigLoader:
    """Loader that only sees defaults and explicit overrides."""
    return ConfigLoader.create(empty_config_dir)


@pytest.fixture
def valid_order() -> srp.Order:
    """An order that passes validation."""
    return srp.Order("order-001", "ada@example.com", {"keyboard": 49.5, "mouse": 20.0})


@pytest.fixture
def invalid_order() -> srp.Order:
    """An order with no items and a malformed address."""
    return srp.Order("order-002", "not-an-address", {})
