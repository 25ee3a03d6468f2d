"""Shared utilities for OptionsGroup CLI commands."""

from .config_helpers import args_to_config, registry_config
from .output import OutputFormatter, format_value

__all__ = [
    "OutputFormatter",
    "format_value",
    "args_to_config",
    "registry_config",
]
