"""
Pipeline configuration.

Values are resolved from, lowest to highest precedence: the defaults below,
an optional YAML file, and explicit keyword overrides (the CLI flags).

Example YAML:

    input_path: data/soc-redditHyperlinks-title.tsv
    output_path: out/title_distn.png
    single_pass: true
    chart:
      x_max: 120
      y_max: 8000
"""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml  # from PyYAML

from .classes.exceptions import ConfigError
from .io.render import ChartStyle

logger = logging.getLogger(__name__)

DEFAULT_INPUT_PATH = "./soc-redditHyperlinks-body.tsv"
DEFAULT_OUTPUT_PATH = "./distn.png"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PipelineConfig:
    """Settings of one degree distribution run."""
    input_path: Path = Path(DEFAULT_INPUT_PATH)
    output_path: Path = Path(DEFAULT_OUTPUT_PATH)
    single_pass: bool = False
    log_level: str = "INFO"
    chart: ChartStyle = field(default_factory=ChartStyle)

    def __post_init__(self):
        self.input_path = _coerce_path("input_path", self.input_path)
        self.output_path = _coerce_path("output_path", self.output_path)
        if not isinstance(self.single_pass, bool):
            raise ConfigError(f"single_pass must be true or false, got {self.single_pass!r}")
        if not isinstance(self.chart, ChartStyle):
            raise ConfigError(f"chart must be a ChartStyle, got {type(self.chart).__name__}")
        if not isinstance(self.log_level, str):
            raise ConfigError(f"log_level must be a string, got {self.log_level!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level {self.log_level!r}; expected one of {', '.join(LOG_LEVELS)}")


def _coerce_path(name: str, value: Any) -> Path:
    if isinstance(value, (str, os.PathLike)) and str(value):
        return Path(value)
    raise ConfigError(f"{name} must be a non-empty path, got {value!r}")


def _field_names(cls) -> set:
    return {f.name for f in fields(cls)}


def config_from_dict(data: Dict[str, Any]) -> PipelineConfig:
    """
    Build a PipelineConfig from a plain mapping.

    Args:
        data: Top-level settings, with an optional nested ``chart`` mapping

    Returns:
        PipelineConfig with unspecified values left at their defaults

    Raises:
        ConfigError: If the mapping contains unknown keys or invalid values
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

    unknown = set(data) - _field_names(PipelineConfig)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    values = dict(data)
    chart_data = values.pop("chart", None) or {}
    if not isinstance(chart_data, dict):
        raise ConfigError("The 'chart' section must be a mapping")

    unknown_chart = set(chart_data) - _field_names(ChartStyle)
    if unknown_chart:
        raise ConfigError(f"Unknown chart keys: {', '.join(sorted(unknown_chart))}")

    return PipelineConfig(chart=ChartStyle(**chart_data), **values)


def load_config(config_path: Optional[Union[str, Path]] = None, **overrides: Any) -> PipelineConfig:
    """
    Load the pipeline configuration.

    Args:
        config_path: Optional YAML file to read
        **overrides: Top-level settings that win over the file; None values
            are ignored so unset CLI flags fall through

    Returns:
        Resolved PipelineConfig

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings
    """
    data: Dict[str, Any] = {}

    if config_path is not None:
        path = Path(config_path)
        try:
            with path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in configuration file {path}: {e}") from e

        if loaded is not None:
            if not isinstance(loaded, dict):
                raise ConfigError(f"Configuration file {path} must contain a mapping")
            data.update(loaded)
        logger.debug(f"Loaded configuration from {path}")

    applied = {key: value for key, value in overrides.items() if value is not None}
    if "chart" in applied:
        raise ConfigError("chart settings cannot be passed as overrides")
    data.update(applied)

    return config_from_dict(data)
