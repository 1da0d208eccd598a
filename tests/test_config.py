"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from autocommit.config.defaults import DEFAULT_TOML
from autocommit.config.loader import ConfigError, load_config


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.input.format == "auto"
        assert cfg.output.format == "text"
        assert cfg.output.explain is False
        assert cfg.logging.level == "warning"

    def test_custom_toml(self, tmp_path: Path):
        (tmp_path / ".autocommit.toml").write_text(
            'version = "1.0"\n'
            '[input]\n'
            'format = "diff-index"\n'
            '[output]\n'
            'format = "json"\n'
            'explain = true\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.input.format == "diff-index"
        assert cfg.output.format == "json"
        assert cfg.output.explain is True

    def test_starter_template_loads(self, tmp_path: Path):
        (tmp_path / ".autocommit.toml").write_text(DEFAULT_TOML)
        cfg = load_config(tmp_path)
        assert cfg.input.format == "auto"
        assert cfg.logging.level == "warning"

    def test_unknown_keys_ignored(self, tmp_path: Path):
        (tmp_path / ".autocommit.toml").write_text('[output]\ncolour = "always"\n')
        cfg = load_config(tmp_path)
        assert cfg.output.format == "text"

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text('[logging]\nlevel = "debug"\n')
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.logging.level == "debug"

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / ".autocommit.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_non_utf8_file_raises(self, tmp_path: Path):
        (tmp_path / ".autocommit.toml").write_bytes(b'version = "\xff"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_section_not_a_table_raises(self, tmp_path: Path):
        (tmp_path / ".autocommit.toml").write_text('input = "status"\n')
        with pytest.raises(ConfigError, match=r"\[input\] must be a table"):
            load_config(tmp_path)

    def test_invalid_value_raises(self, tmp_path: Path):
        (tmp_path / ".autocommit.toml").write_text('[input]\nformat = "porcelain"\n')
        with pytest.raises(ConfigError, match="input format"):
            load_config(tmp_path)


class TestEnvVarOverrides:
    def test_input_format_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("AUTOCOMMIT_INPUT_FORMAT", "status")
        cfg = load_config(tmp_path)
        assert cfg.input.format == "status"

    def test_output_format_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("AUTOCOMMIT_OUTPUT_FORMAT", "json")
        cfg = load_config(tmp_path)
        assert cfg.output.format == "json"

    def test_log_level_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("AUTOCOMMIT_LOG_LEVEL", "INFO")
        cfg = load_config(tmp_path)
        assert cfg.logging.level == "info"

    def test_env_beats_file(self, tmp_path: Path, monkeypatch):
        (tmp_path / ".autocommit.toml").write_text('[output]\nformat = "text"\n')
        monkeypatch.setenv("AUTOCOMMIT_OUTPUT_FORMAT", "json")
        cfg = load_config(tmp_path)
        assert cfg.output.format == "json"

    def test_invalid_env_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("AUTOCOMMIT_OUTPUT_FORMAT", "yaml")
        cfg = load_config(tmp_path)
        assert cfg.output.format == "text"  # default unchanged
