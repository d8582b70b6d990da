"""streamta.core.config

Two config surfaces only:
1) Settings: YAML file and/or ``STREAMTA_`` environment variables
2) Presets: YAML lists of indicator/strategy configs by name

Preset parameters go through ``set`` as text, the same path any other
config loader takes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from streamta.core.exceptions import ConfigError
from streamta.core.indicator import IndicatorConfig
from streamta.core.strategy import StrategyConfig

logger = logging.getLogger(__name__)

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class LoggingConfig(BaseModel):
    level: str = "INFO"
    json_output: bool = False

    @field_validator("level")
    @classmethod
    def level_must_be_known(cls, v: str) -> str:
        v = v.upper()
        if v not in _LEVELS:
            raise ValueError(f"unknown log level: {v}")
        return v


class Settings(BaseSettings):
    """Root settings. Single source of truth."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    presets_path: Path | None = None

    model_config = {"env_prefix": "STREAMTA_", "env_nested_delimiter": "__"}

    @classmethod
    def from_yaml(cls, path: Path) -> Settings:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        raw = yaml.safe_load(path.read_text()) or {}
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file must be a mapping: {path}")
        return cls(**raw)

    def load_presets(self) -> list[IndicatorConfig | StrategyConfig]:
        """Configs from ``presets_path``; relative paths resolve against the cwd."""

        if self.presets_path is None:
            raise ConfigError("presets_path is not set")
        return load_presets(self.presets_path)


class PresetEntry(BaseModel):
    name: str
    params: dict[str, Any] = Field(default_factory=dict)


class PresetFile(BaseModel):
    indicators: list[PresetEntry] = Field(default_factory=list)
    strategies: list[PresetEntry] = Field(default_factory=list)


def load_presets(path: Path) -> list[IndicatorConfig | StrategyConfig]:
    """Configs listed in a preset file, in file order (indicators first)."""

    from streamta.registry import build_config

    if not path.exists():
        raise ConfigError(f"Preset file not found: {path}")
    raw = yaml.safe_load(path.read_text()) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Preset file must be a mapping: {path}")
    preset = PresetFile(**raw)

    out: list[IndicatorConfig | StrategyConfig] = []
    for kind, entries in (("indicator", preset.indicators), ("strategy", preset.strategies)):
        for entry in entries:
            try:
                out.append(build_config(kind, entry.name, entry.params))
            except KeyError as e:
                raise ConfigError(f"Unknown {kind} in {path}: {entry.name}") from e

    logger.info("presets_loaded", extra={"path": str(path), "count": len(out)})
    return out
