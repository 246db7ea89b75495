"""Configuration loading for the ticker demo and CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator


class TickerSettings(BaseModel):
    """Ticker run parameters."""

    symbol: str = "MSFT"
    low_limit: int = 80
    high_limit: int = 120
    price_floor: int = 60
    price_spread: int = Field(default=80, ge=1)
    interval: float = Field(default=1.0, ge=0)
    ticks: int = Field(default=10, ge=0)
    seed: int | None = None

    @model_validator(mode="after")
    def _check_limits(self) -> TickerSettings:
        if self.high_limit <= self.low_limit:
            raise ValueError("high_limit must be greater than low_limit")
        return self


class JournalSettings(BaseModel):
    """Price journal output."""

    enabled: bool = False
    path: str = "logs/prices.jsonl"


class LoggingSettings(BaseModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


class AppConfig(BaseModel):
    """Effective application configuration."""

    ticker: TickerSettings = Field(default_factory=TickerSettings)
    journal: JournalSettings = Field(default_factory=JournalSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


CONFIG_LAYERS = ("default.yaml", "local.yaml")


def read_config_layer(path: Path) -> dict[str, Any]:
    """Read one YAML layer; a missing or empty file contributes nothing."""
    if not path.is_file():
        return {}
    layer = yaml.safe_load(path.read_text(encoding="utf-8"))
    if layer is None:
        return {}
    if not isinstance(layer, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return layer


def overlay(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` laid over it, section by section."""
    result = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = overlay(current, value)
        result[key] = value
    return result


def load_app_config(root: Path, overrides: dict[str, Any] | None = None) -> AppConfig:
    """Layer ``config/default.yaml``, ``config/local.yaml`` and ``overrides``, then validate."""
    raw: dict[str, Any] = {}
    for name in CONFIG_LAYERS:
        raw = overlay(raw, read_config_layer(root / "config" / name))
    return AppConfig.model_validate(overlay(raw, overrides or {}))
