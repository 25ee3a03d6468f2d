"""
Configuration management package for OptionsGroup.

This package provides a unified configuration system that supports:
- Multiple configuration sources (environment variables, config files, runtime overrides)
- Type-safe configuration validation using Pydantic
- Selection of the option store backend and its location
"""

from .settings_sources import (
    YamlConfigSettingsSource,
    TomlConfigSettingsSource,
    JsonConfigSettingsSource,
    create_config_sources,
    find_config_files,
)
from .unified_config import (
    OptionsGroupConfig,
    StoreConfig,
    get_config,
    reset_config,
    set_config,
)

__all__ = [
    "OptionsGroupConfig",
    "StoreConfig",
    "get_config",
    "set_config",
    "reset_config",
    "YamlConfigSettingsSource",
    "TomlConfigSettingsSource",
    "JsonConfigSettingsSource",
    "create_config_sources",
    "find_config_files",
]
