"""Tests for settings loading."""

import pytest

from unitdef import ConfigError, FormatOptions, Settings, load_settings
from unitdef.config import CONFIG_ENV


class TestLoadSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV, raising=False)
        settings = load_settings()
        assert settings == Settings()
        assert settings.encoding == "utf-8"
        assert settings.format.indent == "\t"

    def test_from_file(self, tmp_path):
        path = tmp_path / "unitdef.yaml"
        path.write_text('encoding: cp932\nformat:\n  indent: "  "\n  newline: "\\r\\n"\n')
        settings = load_settings(path)
        assert settings.encoding == "cp932"
        assert settings.format == FormatOptions(indent="  ", newline="\r\n")

    def test_from_environment(self, tmp_path, monkeypatch):
        path = tmp_path / "unitdef.yaml"
        path.write_text("encoding: euc_jp\n")
        monkeypatch.setenv(CONFIG_ENV, str(path))
        assert load_settings().encoding == "euc_jp"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "unitdef.yaml"
        path.write_text("")
        assert load_settings(path) == Settings()

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "unitdef.yaml"
        path.write_text("colour: blue\n")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "unitdef.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "unitdef.yaml"
        path.write_text("encoding: [unclosed\n")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_settings(tmp_path / "nope.yaml")
