"""Shared pytest fixtures for floatcalc tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from floatcalc.core.config import CONFIG_FILENAME, CalculatorConfig


@pytest.fixture
def default_config() -> CalculatorConfig:
    """Return the built-in configuration."""
    return CalculatorConfig()


@pytest.fixture
def missing_config(tmp_path: Path) -> Path:
    """Return a config path that does not exist, so defaults apply."""
    return tmp_path / CONFIG_FILENAME


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory that writes floatcalc.toml content and returns its path."""

    def _write(content: str) -> Path:
        path = tmp_path / CONFIG_FILENAME
        path.write_text(content)
        return path

    return _write
