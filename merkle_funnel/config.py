"""Configuration loader for Merkle Funnel.

Loads config/merkle.yaml, then applies MERKLE_FUNNEL_* environment
overrides (the CLI loads .env first).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

WORKSPACE = Path(__file__).resolve().parent.parent
CONFIG_DIR = WORKSPACE / "config"
CONFIG_PATH = CONFIG_DIR / "merkle.yaml"

ENV_LOG_LEVEL = "MERKLE_FUNNEL_LOG_LEVEL"
ENV_SHOW_LAYERS = "MERKLE_FUNNEL_SHOW_LAYERS"

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _to_bool(v: str) -> bool:
    return str(v).strip().lower() in {"1", "true", "yes", "y", "on"}


class CliConfig(BaseModel):
    show_layers: bool = False
    skip_blank_lines: bool = True
    input_encoding: str = "utf-8"


class MerkleFunnelConfig(BaseModel):
    log_level: str = "WARNING"
    cli: CliConfig = Field(default_factory=CliConfig)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return level

    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def load_raw_config(path: Path | None = None) -> dict[str, Any]:
    """Load config/merkle.yaml (or path) as a plain dict."""
    path = path or CONFIG_PATH
    if not path.exists():
        return {}
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: top level must be a mapping, got {type(raw).__name__}")
    return raw


def load_config(path: Path | None = None) -> MerkleFunnelConfig:
    """Load settings with environment overrides applied."""
    raw = load_raw_config(path)

    level = os.environ.get(ENV_LOG_LEVEL)
    if level:
        raw["log_level"] = level

    show_layers = os.environ.get(ENV_SHOW_LAYERS)
    if show_layers is not None:
        cli = raw.get("cli") or {}
        cli["show_layers"] = _to_bool(show_layers)
        raw["cli"] = cli

    return MerkleFunnelConfig.model_validate(raw)
