"""Tests for configuration loading."""

import logging
import os
import tempfile

import pytest
import yaml

from partner_finder.config import AppConfig, ConfigError, load_config, validate_config


@pytest.fixture
def config_file():
    """Create a temporary config file."""
    config_data = {
        "store": {"data_file": "/path/to/partners.json"},
        "search": {"max_keywords": 3},
        "log_dir": "/tmp/partner-logs",
        "log_level": "DEBUG",
    }

    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        yaml.dump(config_data, f)
        path = f.name

    yield path
    os.unlink(path)


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    monkeypatch.delenv("PARTNER_FINDER_DATA_FILE", raising=False)
    monkeypatch.delenv("PARTNER_FINDER_LOG_LEVEL", raising=False)


class TestLoadConfig:
    def test_loads_valid_config(self, config_file):
        config = load_config(config_file)
        assert config.store.data_file == "/path/to/partners.json"
        assert config.search.max_keywords == 3
        assert config.log_level == "DEBUG"
        assert config.log_level_value == logging.DEBUG

    def test_no_path_uses_defaults(self):
        config = load_config()
        assert config.store.data_file == "Data.json"
        assert config.search.max_keywords == 2
        assert config.log_dir == "logs"

    def test_missing_file_raises(self):
        with pytest.raises(FileNotFoundError):
            load_config("nonexistent.yaml")

    def test_env_overrides_file(self, config_file, monkeypatch):
        monkeypatch.setenv("PARTNER_FINDER_DATA_FILE", "/env/Data.json")
        monkeypatch.setenv("PARTNER_FINDER_LOG_LEVEL", "WARNING")
        config = load_config(config_file)
        assert config.store.data_file == "/env/Data.json"
        assert config.log_level_value == logging.WARNING

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("store: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(str(path))

    def test_bad_section_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("store: just-a-string\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="store"):
            load_config(str(path))

    def test_bad_max_keywords_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("search:\n  max_keywords: lots\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="max_keywords"):
            load_config(str(path))

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(str(path)).store.data_file == "Data.json"


class TestValidateConfig:
    def test_missing_data_file_warns(self):
        config = AppConfig()
        config.store.data_file = "/nonexistent/Data.json"
        warnings = validate_config(config)
        assert any("data file not found" in w.lower() for w in warnings)

    def test_existing_data_file_ok(self, store_file):
        config = AppConfig()
        config.store.data_file = store_file
        assert validate_config(config) == []

    def test_max_keywords_below_one_warns(self, store_file):
        config = AppConfig()
        config.store.data_file = store_file
        config.search.max_keywords = 0
        assert any("max_keywords" in w for w in validate_config(config))

    def test_unknown_log_level_warns(self, store_file):
        config = AppConfig()
        config.store.data_file = store_file
        config.log_level = "LOUD"
        assert any("log_level" in w for w in validate_config(config))
        assert config.log_level_value == logging.INFO


class TestConfigValueTypes:
    @pytest.mark.parametrize("content, name", [
        ("store:\n  data_file: 2024\n", "store.data_file"),
        ("store:\n  data_file: ''\n", "store.data_file"),
        ("log_dir: [a, b]\n", "log_dir"),
        ("log_level: 10\n", "log_level"),
    ])
    def test_non_string_values_raise(self, tmp_path, content, name):
        path = tmp_path / "config.yaml"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError, match=name):
            load_config(str(path))

    def test_quoted_number_accepted(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("store:\n  data_file: '2024'\n", encoding="utf-8")
        assert load_config(str(path)).store.data_file == "2024"
