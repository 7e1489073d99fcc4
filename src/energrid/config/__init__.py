"""Configuration module for the ENERGRID simulation engine.

This module provides configuration loading capabilities using Pydantic models
to read YAML configuration files for runtime settings.
"""

from .loaders import YamlConfigLoader, load_config_from_dict, load_config_from_yaml
from .schema import EnergridConfig, GridConfig, LoggingConfig, SimulationConfig, SourceConfig

__all__ = [
    # Configuration schema models
    "EnergridConfig",
    "SimulationConfig",
    "GridConfig",
    "SourceConfig",
    "LoggingConfig",
    # Configuration loaders
    "YamlConfigLoader",
    # Convenience functions
    "load_config_from_yaml",
    "load_config_from_dict",
]
