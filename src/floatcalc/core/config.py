"""
Calculator configuration models.

Parses floatcalc.toml and provides typed configuration for the REPL,
number output and parser limits. Every section and key is optional.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from floatcalc.core.errors import ConfigError
from floatcalc.core.expression_lang.numeric import NumberFormat
from floatcalc.core.expression_lang.parser import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "floatcalc.toml"


class ReplConfig(BaseModel):
    """Interactive loop configuration."""

    model_config = ConfigDict(extra="forbid")

    prompt: str = ">>> "
    banner: bool = True
    exit_command: str = Field(default="exit", min_length=1)


class OutputConfig(BaseModel):
    """How results are printed."""

    model_config = ConfigDict(extra="forbid")

    number_format: NumberFormat = NumberFormat.GENERAL
    precision: int = Field(default=6, ge=1, le=9)


class ParserConfig(BaseModel):
    """Parser limits."""

    model_config = ConfigDict(extra="forbid")

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1, le=DEFAULT_MAX_DEPTH)


class CalculatorConfig(BaseModel):
    """Complete calculator configuration."""

    model_config = ConfigDict(extra="forbid")

    repl: ReplConfig = Field(default_factory=ReplConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)

    @property
    def margin(self) -> int:
        """Caret margin for diagnostics printed under a prompt line."""
        return len(self.repl.prompt)


def load_config(toml_path: Path) -> CalculatorConfig:
    """
    Load calculator configuration from floatcalc.toml.

    Args:
        toml_path: Path to floatcalc.toml file

    Returns:
        CalculatorConfig with parsed values or defaults

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid settings
    """
    if not toml_path.exists():
        logger.debug("No config at %s, using defaults", toml_path)
        return CalculatorConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{toml_path}: invalid TOML: {e}") from e

    try:
        config = CalculatorConfig.model_validate(data)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"{toml_path}: {problems}") from e

    logger.debug("Loaded config from %s", toml_path)
    return config
