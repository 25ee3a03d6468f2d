"""
Configuration helper utilities for CLI commands.

This module bridges CLI arguments with the unified configuration system
and the provider registry.
"""

import argparse
from pathlib import Path
from typing import Any, Dict

from optionsgroup.core.config.unified_config import OptionsGroupConfig


def args_to_config(args: argparse.Namespace, project_dir: Path | None = None) -> OptionsGroupConfig:
    """
    Convert CLI arguments to unified configuration.

    Args:
        args: Parsed CLI arguments
        project_dir: Project directory for config file loading

    Returns:
        OptionsGroupConfig instance
    """
    config_overrides: Dict[str, Any] = {}

    store_config = {}
    if getattr(args, 'backend', None):
        store_config['backend'] = args.backend
    if getattr(args, 'store_path', None):
        store_config['path'] = str(args.store_path)
    if store_config:
        config_overrides['store'] = store_config

    if getattr(args, 'verbose', False):
        config_overrides['debug'] = True

    return OptionsGroupConfig.load_hierarchical(
        project_dir=project_dir,
        config_file=getattr(args, 'config', None),
        **config_overrides
    )


def registry_config(config: OptionsGroupConfig) -> Dict[str, Any]:
    """
    Build the registry configuration dictionary with the store path resolved.

    Args:
        config: Loaded configuration

    Returns:
        Dictionary suitable for ``ProviderRegistry.configure``
    """
    data = config.to_dict()
    store_path = config.store.resolved_path()
    if store_path is not None:
        data.setdefault('store', {})['path'] = str(store_path)
    return data
