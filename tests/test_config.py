"""Tests for user configuration."""

import sys
from pathlib import Path

import pytest
import typer

from dsconv.config import Config
from dsconv.core.exceptions import ConfigError


class TestConfigLocation:
    """Tests for locating the configuration file."""

    @pytest.mark.skipif(sys.platform in ("darwin", "win32"), reason="XDG layout on Linux only")
    def test_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Test that XDG_CONFIG_HOME is honored."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        assert Config.config_dir() == tmp_path / "xdg" / "dsconv"

    @pytest.mark.skipif(sys.platform in ("darwin", "win32"), reason="XDG layout on Linux only")
    def test_home_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Test the ~/.config default."""
        monkeypatch.delenv("XDG_CONFIG_HOME")
        monkeypatch.setenv("HOME", str(tmp_path))

        assert Config.config_dir() == tmp_path / ".config" / "dsconv"

    def test_platform_app_dir(self):
        """Test that the directory is the platform application directory."""
        assert Config.config_dir() == Path(typer.get_app_dir("dsconv"))

    def test_path_missing(self):
        """Test that path() is None without a file."""
        assert Config.path() is None

    def test_path_existing(self, write_config):
        """Test that path() finds an existing file."""
        path = write_config("pretty = true\n")
        assert Config.path() == path


class TestConfigLoading:
    """Tests for loading configuration."""

    def test_defaults_without_file(self):
        """Test defaults when no file exists."""
        config = Config.load()

        assert config.pretty is None
        assert config.resolve_pretty(None) is False

    def test_pretty_from_file(self, write_config):
        """Test reading pretty = true."""
        write_config("pretty = true\n")
        config = Config.load()

        assert config.pretty is True
        assert config.resolve_pretty(None) is True

    def test_flag_overrides_file(self, write_config):
        """Test that the command-line flag wins."""
        write_config("pretty = true\n")

        assert Config.load().resolve_pretty(False) is False

    def test_unknown_keys_ignored(self, write_config):
        """Test that unrecognized keys are ignored."""
        write_config('pretty = false\ntheme = "dark"\n')
        assert Config.load().pretty is False

    def test_malformed_file(self, write_config):
        """Test that invalid TOML is a ConfigError."""
        path = write_config("pretty = \n")

        with pytest.raises(ConfigError) as exc_info:
            Config.load()

        assert exc_info.value.path == path

    def test_wrong_type(self, write_config):
        """Test that a non-boolean pretty is a ConfigError."""
        write_config('pretty = "yes"\n')

        with pytest.raises(ConfigError, match="must be a boolean"):
            Config.load()

    def test_from_dict(self):
        """Test building config from a dictionary."""
        assert Config.from_dict({"pretty": True}).pretty is True
        assert Config.from_dict({}).pretty is None
