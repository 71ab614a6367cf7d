"""Tests for utils.config module."""

import pytest
from pydantic import ValidationError

from utils.config import AppSettings, Config
from utils.themes import THEMES


class TestAppSettings:
    """Tests for AppSettings validation."""

    def test_defaults(self):
        """Test default settings."""
        settings = AppSettings()

        assert settings.theme == "default"
        assert settings.fgcol is None
        assert settings.noskip is False
        assert settings.timeout == -1
        assert settings.wrap == 80

    def test_invalid_color_rejected(self):
        """Test colours must be #rrggbb."""
        with pytest.raises(ValidationError):
            AppSettings(errcol="red")

    def test_invalid_timeout_rejected(self):
        """Test timeout below -1 is rejected."""
        with pytest.raises(ValidationError):
            AppSettings(timeout=-5)

    def test_zero_timeout_rejected(self):
        """Test a zero time limit is rejected."""
        with pytest.raises(ValidationError):
            AppSettings(timeout=0)

    def test_unknown_keys_ignored(self):
        """Test extra keys do not fail validation."""
        settings = AppSettings(unknown="value")
        assert not hasattr(settings, "unknown")


class TestConfigFile:
    """Tests for reading the config file."""

    def test_missing_file_gives_defaults(self, tmp_path):
        """Test a missing file yields default settings."""
        config = Config(tmp_path / "missing")

        assert config.raw == {}
        assert config.get_all() == AppSettings().model_dump()

    def test_key_value_lines(self, config_file):
        """Test `key: value` lines are parsed and stripped."""
        config = Config(config_file("theme: nord\nfgcol:  #112233 \nnot a setting\n"))

        assert config.get("theme") == "nord"
        assert config.get("fgcol") == "#112233"
        assert "not a setting" not in config.raw

    def test_value_may_contain_colon(self, config_file):
        """Test only the first colon separates key and value."""
        config = Config(config_file("note: a:b\n"))

        assert config.raw["note"] == "a:b"

    def test_invalid_value_dropped(self, config_file):
        """Test an invalid value falls back to its default only."""
        config = Config(config_file("theme: nord\nerrcol: red\nwrap: 0\n"))

        assert config.get("theme") == "nord"
        assert config.get("errcol") is None
        assert config.get_int("wrap") == 80

    def test_get_bool_and_int(self, config_file):
        """Test typed getters parse file values."""
        config = Config(config_file("noskip: yes\ntimeout: 30\n"))

        assert config.get_bool("noskip") is True
        assert config.get_int("timeout") == 30

    def test_unknown_key_returns_default(self, config_file):
        """Test keys outside AppSettings are not exposed."""
        config = Config(config_file("count: 12\n"))

        assert config.get("count") is None
        assert config.get("absent", "fallback") == "fallback"
        assert config.get_int("count", 3) == 3

    def test_zero_timeout_dropped(self, config_file):
        """Test timeout: 0 is dropped so it cannot break every run."""
        config = Config(config_file("timeout: 0\nwrap: 60\n"))

        assert config.get_int("timeout") == -1
        assert config.get_int("wrap") == 60


class TestResolveTheme:
    """Tests for Config.resolve_theme."""

    def test_default_theme(self, tmp_path):
        """Test the default theme is used without configuration."""
        config = Config(tmp_path / "missing")

        assert config.resolve_theme() == THEMES["default"]

    def test_configured_theme_with_overrides(self, config_file):
        """Test colour overrides apply on top of the configured theme."""
        config = Config(config_file("theme: gruvbox\nerrcol: #ff0000\n"))
        colors = config.resolve_theme()

        assert colors["errcol"] == "#ff0000"
        assert colors["fgcol"] == THEMES["gruvbox"]["fgcol"]

    def test_unknown_configured_theme_falls_back(self, config_file):
        """Test an unknown theme in the file falls back to default."""
        config = Config(config_file("theme: nope\n"))

        assert config.resolve_theme() == THEMES["default"]

    def test_explicit_theme_ignores_overrides(self, config_file):
        """Test a theme named on the command line is used as-is."""
        config = Config(config_file("errcol: #ff0000\n"))

        assert config.resolve_theme("nord") == THEMES["nord"]

    def test_explicit_unknown_theme_raises(self, tmp_path):
        """Test an unknown explicit theme raises KeyError."""
        config = Config(tmp_path / "missing")

        with pytest.raises(KeyError):
            config.resolve_theme("nope")
