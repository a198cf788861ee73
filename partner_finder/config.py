"""YAML config loading and validation."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Config file exists but cannot be used."""


@dataclass
class StoreConfig:
    data_file: str = "Data.json"


@dataclass
class SearchConfig:
    max_keywords: int = 2  # enforced by the web UI only


@dataclass
class AppConfig:
    store: StoreConfig = field(default_factory=StoreConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    log_dir: str = "logs"
    log_level: str = "INFO"

    @property
    def log_level_value(self) -> int:
        name = str(self.log_level).upper()
        return getattr(logging, name) if name in LOG_LEVELS else logging.INFO


def _section(raw: dict, name: str) -> dict:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")
    return value


def _text(value, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{name} must be a non-empty string, got {value!r}")
    return value


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load configuration from YAML, falling back to defaults when no path is given.

    Environment variables take precedence over file values.
    """
    raw = {}
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                "Copy config.example.yaml to config.yaml and adjust it."
            )
        with open(path, "r", encoding="utf-8") as f:
            try:
                raw = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")

    config = AppConfig()

    store_raw = _section(raw, "store")
    config.store = StoreConfig(
        data_file=_text(
            os.environ.get("PARTNER_FINDER_DATA_FILE", store_raw.get("data_file", "Data.json")),
            "store.data_file",
        ),
    )

    search_raw = _section(raw, "search")
    try:
        max_keywords = int(search_raw.get("max_keywords", 2))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"search.max_keywords must be an integer: {e}") from e
    config.search = SearchConfig(max_keywords=max_keywords)

    config.log_dir = _text(raw.get("log_dir", "logs"), "log_dir")
    config.log_level = _text(
        os.environ.get("PARTNER_FINDER_LOG_LEVEL", raw.get("log_level", "INFO")), "log_level"
    )

    return config


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    if not Path(config.store.data_file).exists():
        warnings.append(
            f"Data file not found: {config.store.data_file} - searches will return no results"
        )

    if config.search.max_keywords < 1:
        warnings.append("search.max_keywords is below 1 - the web search will reject every query")

    if str(config.log_level).upper() not in LOG_LEVELS:
        warnings.append(f"Unknown log_level '{config.log_level}' - using INFO")

    return warnings
