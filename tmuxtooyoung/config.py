"""Reading and writing the user's configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_FILENAME = ".tmux-too-young.yaml"


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or parsed."""


@dataclass
class Configuration:
    """The settings stored in the configuration file."""

    search_directories: list[str] = field(default_factory=list)


def config_path() -> Path:
    """Return the location of the configuration file in the home directory."""
    return Path.home() / CONFIG_FILENAME


def get_config() -> Configuration:
    """Load the configuration file."""
    path = config_path()
    try:
        contents = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read config file: {exc}") from exc

    try:
        data = yaml.safe_load(contents)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse config file: {exc}") from exc

    if data is None:
        return Configuration()
    if not isinstance(data, dict):
        raise ConfigError("Failed to parse config file: expected a mapping")

    directories = data.get("search_directories") or []
    if not isinstance(directories, list):
        raise ConfigError("Failed to parse config file: search_directories must be a list")
    return Configuration(search_directories=[str(d) for d in directories])


def config_exists() -> bool:
    """Tell whether the configuration file is present."""
    return config_path().exists()


def create_config(search_directories) -> None:
    """Write a configuration file holding the given search directories."""
    document = {"search_directories": list(search_directories)}
    text = yaml.safe_dump(document, default_flow_style=False, sort_keys=False)
    config_path().write_text(text, encoding="utf-8")