"""Load and merge configuration from .autocommit.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from autocommit.config.schema import (
    INPUT_FORMATS,
    OUTPUT_FORMATS,
    AutoCommitConfig,
    InputConfig,
    LoggingConfig,
    OutputConfig,
)
from autocommit.log import LOG_LEVELS

CONFIG_FILENAME = ".autocommit.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: AutoCommitConfig) -> None:
    """Apply AUTOCOMMIT_* environment variable overrides."""
    if val := os.environ.get("AUTOCOMMIT_INPUT_FORMAT"):
        if val in INPUT_FORMATS:
            cfg.input.format = val  # type: ignore[assignment]
    if val := os.environ.get("AUTOCOMMIT_OUTPUT_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("AUTOCOMMIT_LOG_LEVEL"):
        if val.lower() in LOG_LEVELS:
            cfg.logging.level = val.lower()  # type: ignore[assignment]


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    values = data.get(section, {})
    if not isinstance(values, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in values.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: AutoCommitConfig, source: Path) -> None:
    if cfg.input.format not in INPUT_FORMATS:
        raise ConfigError(f"{source}: invalid input format {cfg.input.format!r}")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"{source}: invalid output format {cfg.output.format!r}")
    if cfg.logging.level not in LOG_LEVELS:
        raise ConfigError(f"{source}: invalid log level {cfg.logging.level!r}")


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> AutoCommitConfig:
    """Load, validate, and return an AutoCommitConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = AutoCommitConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = AutoCommitConfig(
            version=raw.get("version", "1.0"),
            input=_build_section(raw, InputConfig, "input"),
            output=_build_section(raw, OutputConfig, "output"),
            logging=_build_section(raw, LoggingConfig, "logging"),
        )
        _validate(cfg, config_path)

    _merge_env_overrides(cfg)
    return cfg
