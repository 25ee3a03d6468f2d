"""
Custom settings sources for OptionsGroup configuration management.

This module provides Pydantic settings sources that load configuration
from YAML, TOML and JSON files, plus helpers to discover those files in the
usual locations.
"""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type, Union

import yaml
from loguru import logger
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

CONFIG_FILE_NAMES = [
    '.optionsgroup.yaml',
    '.optionsgroup.yml',
    '.optionsgroup.toml',
    '.optionsgroup.json',
]

USER_CONFIG_FILE_NAMES = [
    'config.yaml',
    'config.yml',
    'config.toml',
    'config.json',
]


class BaseFileConfigSettingsSource(PydanticBaseSettingsSource, ABC):
    """
    Abstract base class for file-based configuration sources.

    Later files override earlier ones. Files that fail to parse are logged
    and skipped.
    """

    def __init__(
        self,
        settings_cls: Type[BaseSettings],
        config_file: Union[str, Path, List[Union[str, Path]]]
    ):
        """
        Initialize file-based configuration source.

        Args:
            settings_cls: The settings class
            config_file: Path(s) to configuration file(s)
        """
        super().__init__(settings_cls)

        if isinstance(config_file, (str, Path)):
            self.config_files = [Path(config_file)]
        else:
            self.config_files = [Path(f) for f in config_file]

        self._data = self._load_files()

    def _load_files(self) -> Dict[str, Any]:
        """Load and merge data from all configuration files."""
        merged_data: Dict[str, Any] = {}

        for config_file in self.config_files:
            if not config_file.exists():
                logger.warning(f"Config file {config_file} not found")
                continue
            try:
                file_data = self.load_file(config_file)
            except Exception as e:
                logger.warning(f"Failed to load config file {config_file}: {e}")
                continue
            if file_data:
                merged_data.update(file_data)

        return merged_data

    @abstractmethod
    def load_file(self, path: Path) -> Dict[str, Any]:
        """
        Load configuration data from a specific file.

        Args:
            path: Path to the configuration file

        Returns:
            Dictionary containing configuration data
        """
        pass

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> Tuple[Any, str, bool]:
        """Get field value from configuration data."""
        if field_name in self._data:
            return self._data[field_name], field_name, True
        return None, field_name, False

    def __call__(self) -> Dict[str, Any]:
        """Return the loaded configuration data."""
        return self._data

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(config_files={[str(f) for f in self.config_files]})'


class YamlConfigSettingsSource(BaseFileConfigSettingsSource):
    """Configuration source for YAML files."""

    def load_file(self, path: Path) -> Dict[str, Any]:
        """Load YAML configuration file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
            return data if isinstance(data, dict) else {}


class TomlConfigSettingsSource(BaseFileConfigSettingsSource):
    """Configuration source for TOML files."""

    def load_file(self, path: Path) -> Dict[str, Any]:
        """Load TOML configuration file."""
        with open(path, 'rb') as f:
            return tomllib.load(f)


class JsonConfigSettingsSource(BaseFileConfigSettingsSource):
    """Configuration source for JSON files."""

    def load_file(self, path: Path) -> Dict[str, Any]:
        """Load JSON configuration file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
            return data if isinstance(data, dict) else {}


def create_config_sources(
    settings_cls: Type[BaseSettings],
    config_files: Optional[List[Union[str, Path]]] = None,
) -> List[PydanticBaseSettingsSource]:
    """
    Create one settings source per configuration file, picked by extension.

    Args:
        settings_cls: Settings class
        config_files: Configuration files in the order they should be returned

    Returns:
        List of configured settings sources
    """
    sources: List[PydanticBaseSettingsSource] = []

    for config_file in config_files or []:
        config_path = Path(config_file)
        suffix = config_path.suffix.lower()

        if suffix in ('.yaml', '.yml'):
            sources.append(YamlConfigSettingsSource(settings_cls, config_path))
        elif suffix == '.toml':
            sources.append(TomlConfigSettingsSource(settings_cls, config_path))
        elif suffix == '.json':
            sources.append(JsonConfigSettingsSource(settings_cls, config_path))
        else:
            logger.warning(f"Unknown config file format: {config_path}")

    return sources


def find_config_files(
    base_dirs: List[Union[str, Path]],
    config_names: Optional[List[str]] = None,
) -> List[Path]:
    """
    Find configuration files in common locations.

    Args:
        base_dirs: Directories to search, lowest priority first
        config_names: Config file names to look for (defaults to the project names)

    Returns:
        List of found configuration files, lowest priority first
    """
    if config_names is None:
        config_names = CONFIG_FILE_NAMES

    found_files = []

    for base_dir in (Path(d) for d in base_dirs):
        if not base_dir.exists():
            continue

        for config_name in config_names:
            config_path = base_dir / config_name
            if config_path.exists() and config_path.is_file():
                found_files.append(config_path)

    return found_files
