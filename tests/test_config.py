"""
Tests for configuration loading.
"""

from pathlib import Path

import pytest

from duedate.config import AppConfig, get_default_config_path, load_config


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        config = AppConfig()

        assert config.log_level == "WARNING"
        assert config.show_weekday is True

    def test_log_level_is_normalized(self):
        assert AppConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_raises_error(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            AppConfig(log_level="chatty")

    def test_load_from_yaml(self, tmp_path: Path):
        config_path = tmp_path / "duedate.yaml"
        config_path.write_text("log_level: info\nshow_weekday: false\n", encoding="utf-8")

        config = AppConfig.load_from_yaml(config_path)

        assert config.log_level == "INFO"
        assert config.show_weekday is False

    def test_empty_yaml_gives_defaults(self, tmp_path: Path):
        config_path = tmp_path / "duedate.yaml"
        config_path.write_text("", encoding="utf-8")

        assert AppConfig.load_from_yaml(config_path) == AppConfig()

    def test_missing_file_raises_error(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml_raises_error(self, tmp_path: Path):
        config_path = tmp_path / "duedate.yaml"
        config_path.write_text("log_level: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(config_path)

    def test_non_mapping_root_raises_error(self, tmp_path: Path):
        config_path = tmp_path / "duedate.yaml"
        config_path.write_text("- one\n- two\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping at the root level"):
            AppConfig.load_from_yaml(config_path)


def test_default_config_path_prefers_cwd(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "duedate.yaml").write_text("show_weekday: false\n", encoding="utf-8")

    assert get_default_config_path() == tmp_path / "duedate.yaml"
    assert load_config().show_weekday is False


def test_load_config_explicit_path_must_exist(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")
