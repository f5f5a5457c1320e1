"""Tests for configuration loading."""

from pathlib import Path

import pytest

from eui64calc.config import CalculatorConfig, load_config


class TestLoadConfig:
    def test_full_config(self, tmp_path: Path):
        config_file = tmp_path / "eui64calc.toml"
        config_file.write_text(
            '[defaults]\nprefix = "2001:db8::"\nformat = "json"\n\n'
            '[batch]\nmac_column = "Hardware"\nname_column = "Device"\n'
        )
        config = load_config(config_file)

        assert config.defaults.prefix == "2001:db8::"
        assert config.defaults.format == "json"
        assert config.batch.mac_column == "Hardware"
        assert config.batch.prefix_column == ""
        assert config.batch.name_column == "Device"
        assert config.path == config_file

    def test_empty_config_uses_defaults(self, tmp_path: Path):
        config_file = tmp_path / "empty.toml"
        config_file.write_text("")
        config = load_config(config_file)

        assert config.defaults.prefix == ""
        assert config.defaults.format == "text"

    def test_explicit_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_no_path_without_default_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = load_config()
        assert config == CalculatorConfig()
        assert config.path is None

    def test_no_path_reads_default_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "eui64calc.toml").write_text('[defaults]\nprefix = "fe80::"\n')
        config = load_config()
        assert config.defaults.prefix == "fe80::"

    def test_unknown_format(self, tmp_path: Path):
        config_file = tmp_path / "bad.toml"
        config_file.write_text('[defaults]\nformat = "xml"\n')
        with pytest.raises(ValueError, match="Unknown output format 'xml'"):
            load_config(config_file)

    @pytest.mark.parametrize("toml_text, message", [
        ('[defaults]\nprefix = 1\n', "defaults.prefix must be a string"),
        ('[defaults]\nformat = ["json"]\n', "defaults.format must be a string"),
        ('[batch]\nmac_column = 3\n', "batch.mac_column must be a string"),
    ])
    def test_non_string_values(self, tmp_path: Path, toml_text, message):
        config_file = tmp_path / "bad.toml"
        config_file.write_text(toml_text)
        with pytest.raises(ValueError, match=message):
            load_config(config_file)
