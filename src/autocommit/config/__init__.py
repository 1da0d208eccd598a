"""Configuration loading, schema, and defaults."""

from autocommit.config.loader import ConfigError, load_config
from autocommit.config.schema import AutoCommitConfig

__all__ = ["AutoCommitConfig", "ConfigError", "load_config"]
