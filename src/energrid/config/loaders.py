"""YAML configuration loading for the ENERGRID simulation engine.

A configuration file may be partial: whatever it leaves out is taken from
the defaults of ``EnergridConfig`` before validation.
"""

from pathlib import Path
from typing import Any

import yaml

from .schema import EnergridConfig


def _read_mapping(config_path: Path) -> dict[str, Any]:
    """Read a YAML file that must hold a non-empty mapping.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the path is not a file, or the file is empty or not a mapping
        yaml.YAMLError: If YAML parsing fails
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    if not config_path.is_file():
        raise ValueError(f"Configuration path is not a file: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Failed to parse YAML file {config_path}: {e}") from e

    if data is None:
        raise ValueError(f"Configuration file {config_path} is empty")
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {config_path} must contain a YAML mapping")
    return data


class YamlConfigLoader:
    """Reads, validates and writes ``EnergridConfig`` as YAML."""

    def load_config(self, config_path: str | Path) -> EnergridConfig:
        """Load and validate a configuration file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            Validated configuration, defaults filled in
        """
        return self.load_config_from_dict(_read_mapping(Path(config_path)))

    def load_config_from_dict(self, config_dict: dict[str, Any]) -> EnergridConfig:
        if not isinstance(config_dict, dict):
            raise ValueError("Configuration data must be a dictionary")
        return EnergridConfig(**self.merge_with_defaults(config_dict))

    def merge_with_defaults(self, config_dict: dict[str, Any]) -> dict[str, Any]:
        """Overlay a partial configuration on the default one, section by section."""
        return _overlay(EnergridConfig().model_dump(), config_dict)

    def save_config(self, config: EnergridConfig, config_path: str | Path) -> None:
        """Write a configuration as YAML, creating parent directories.

        Enums are written by value so the file reloads with ``yaml.safe_load``.
        """
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(config.model_dump(mode="json"), f, sort_keys=False, indent=2)

    def generate_example_config(self, config_path: str | Path) -> None:
        self.save_config(EnergridConfig(), config_path)


def _overlay(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in update.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _overlay(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config_from_yaml(config_path: str | Path) -> EnergridConfig:
    """Load a configuration file with the default loader."""
    return YamlConfigLoader().load_config(config_path)


def load_config_from_dict(config_dict: dict[str, Any]) -> EnergridConfig:
    """Validate a configuration dictionary with the default loader."""
    return YamlConfigLoader().load_config_from_dict(config_dict)
