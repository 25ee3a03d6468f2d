"""
Unified configuration system for OptionsGroup.

This module provides a single, type-safe configuration model for choosing
and locating the option store, with hierarchical loading from config files,
environment variables and runtime overrides.
"""

import json
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Literal, Tuple, Type

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from core.exceptions import ConfigurationError
from core.types import StoreBackend

from .settings_sources import USER_CONFIG_FILE_NAMES, create_config_sources, find_config_files

DEFAULT_STORE_DIR = Path.home() / '.optionsgroup'

# Config files picked up by the settings class while load_hierarchical runs
_active_config_files: ContextVar[Tuple[Path, ...]] = ContextVar(
    'optionsgroup_config_files', default=()
)


class StoreConfig(BaseModel):
    """Option store configuration."""

    backend: Literal['memory', 'json', 'duckdb'] = Field(
        default='json',
        description="Persistence backend for option groups"
    )

    path: str | None = Field(
        default=None,
        description="File path for the json and duckdb backends"
    )

    autoload: bool = Field(
        default=True,
        description="Autoload flag given to newly stored groups (duckdb)"
    )

    @field_validator('path')
    def normalize_path(cls, v: str | None) -> str | None:
        """Treat blank paths as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def backend_type(self) -> StoreBackend:
        """Backend as an enum member."""
        return StoreBackend(self.backend)

    def resolved_path(self) -> Path | None:
        """
        Path the store should use, falling back to a per-backend default.

        Returns:
            Expanded path, or None for the memory backend
        """
        if not self.backend_type.is_file_based:
            return None
        if self.path:
            return Path(self.path).expanduser()
        filename = 'options.duckdb' if self.backend_type is StoreBackend.DUCKDB else 'options.json'
        return DEFAULT_STORE_DIR / filename


class OptionsGroupConfig(BaseSettings):
    """
    Unified configuration for OptionsGroup.

    Configuration Sources (in order of precedence):
    1. Runtime parameters (highest priority)
    2. Environment variables (OPTIONSGROUP_*)
    3. Explicit config file
    4. Project config file (.optionsgroup.{yaml,yml,toml,json})
    5. User config file (~/.optionsgroup/config.{yaml,yml,toml,json})
    6. Default values (lowest priority)

    Environment Variable Examples:
        OPTIONSGROUP_STORE__BACKEND=duckdb
        OPTIONSGROUP_STORE__PATH=/var/lib/app/options.duckdb
        OPTIONSGROUP_DEFAULT_GROUP=my_plugin_settings
        OPTIONSGROUP_DEBUG=true
    """

    model_config = SettingsConfigDict(
        env_prefix='OPTIONSGROUP_',
        env_nested_delimiter='__',
        case_sensitive=False,
        validate_default=True,
        extra='ignore',
        env_file=None,  # Disable automatic .env loading
    )

    store: StoreConfig = Field(
        default_factory=StoreConfig,
        description="Option store configuration"
    )

    default_group: str | None = Field(
        default=None,
        description="Group used by the CLI when --group is not given"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # Earlier sources win; config files are stored lowest priority first
        file_sources = create_config_sources(settings_cls, list(reversed(_active_config_files.get())))
        return (init_settings, env_settings, *file_sources)

    @classmethod
    def load_hierarchical(
        cls,
        project_dir: Path | None = None,
        config_file: Path | None = None,
        **override_values: Any
    ) -> 'OptionsGroupConfig':
        """
        Load configuration from hierarchical sources.

        Args:
            project_dir: Project directory to search for .optionsgroup.* files
            config_file: Explicit configuration file, highest file priority
            **override_values: Runtime parameter overrides

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationError: If the explicit file is missing or values are invalid
        """
        config_files = find_config_files([DEFAULT_STORE_DIR], USER_CONFIG_FILE_NAMES)
        config_files += find_config_files([project_dir or Path.cwd()])

        if config_file is not None:
            config_file = Path(config_file)
            if not config_file.is_file():
                raise ConfigurationError('config_file', str(config_file), "Config file not found")
            config_files.append(config_file)

        token = _active_config_files.set(tuple(config_files))
        try:
            return cls(**override_values)
        except ValidationError as e:
            raise ConfigurationError(reason=str(e), cause=e) from e
        finally:
            _active_config_files.reset(token)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert configuration to dictionary format.

        Returns:
            Configuration as dictionary
        """
        return self.model_dump(mode='json', exclude_none=True)

    def save_to_file(self, file_path: Path) -> None:
        """
        Save configuration to JSON file.

        Args:
            file_path: Path to save configuration file
        """
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)

    def __repr__(self) -> str:
        return (
            f"OptionsGroupConfig("
            f"store.backend={self.store.backend}, "
            f"store.path={self.store.resolved_path()}, "
            f"default_group={self.default_group})"
        )


# Global configuration instance
_config_instance: OptionsGroupConfig | None = None


def get_config() -> OptionsGroupConfig:
    """
    Get the global configuration instance.

    Returns:
        Global OptionsGroupConfig instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = OptionsGroupConfig.load_hierarchical()
    return _config_instance


def set_config(config: OptionsGroupConfig) -> None:
    """
    Set the global configuration instance.

    Args:
        config: Configuration instance to set as global
    """
    global _config_instance
    _config_instance = config


def reset_config() -> None:
    """Reset the global configuration instance."""
    global _config_instance
    _config_instance = None
