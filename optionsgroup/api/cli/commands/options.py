"""Option commands module - reads and writes a single option group."""

import argparse
import json
import sys
from typing import Any, Callable, Dict

from loguru import logger

from core.types import LifecycleEvent
from providers.host.settings_host import SettingsHost
from registry import configure_registry, reset_registry
from services.options_group import OptionsGroup
from ..utils.config_helpers import args_to_config, registry_config
from ..utils.output import OutputFormatter, format_value

TYPED_GETTERS: Dict[str, Callable[[OptionsGroup], Callable[..., Any]]] = {
    "bool": lambda group: group.get_bool_option,
    "int": lambda group: group.get_int_option,
    "absint": lambda group: group.get_absint_option,
    "abs": lambda group: group.get_abs_option,
    "float": lambda group: group.get_float_option,
}


def option_command(args: argparse.Namespace) -> None:
    """Execute an option command against the configured store.

    Args:
        args: Parsed command-line arguments
    """
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))

    config = args_to_config(args)
    group_name = (args.group or config.default_group or "").strip()
    if not group_name:
        formatter.error("No option group given. Use --group or set default_group in configuration.")
        sys.exit(1)

    handlers = {
        "show": show_command,
        "get": get_command,
        "set": set_command,
        "unset": unset_command,
        "merge": merge_command,
    }
    handler = handlers.get(args.command)
    if handler is None:
        logger.error(f"Unknown command: {args.command}")
        sys.exit(1)

    registry = configure_registry(registry_config(config))
    try:
        host = registry.create_settings_host()
        group = registry.create_options_group(group_name)
        # Lets the group register its sanitize callback with the host
        host.do_action(LifecycleEvent.ADMIN_INIT)
        formatter.verbose_info(f"Using {config.store.backend} store for group {group.name}")
        handler(args, group, host, formatter)
    finally:
        reset_registry()


def show_command(
    args: argparse.Namespace,
    group: OptionsGroup,
    host: SettingsHost,
    formatter: OutputFormatter,
) -> None:
    """Handle show command."""
    if getattr(args, 'json', False):
        formatter.json_output(group.to_dict())
        return

    print(f"Group {group.name} ({len(group)} options):")
    formatter.options_table(group.values)


def get_command(
    args: argparse.Namespace,
    group: OptionsGroup,
    host: SettingsHost,
    formatter: OutputFormatter,
) -> None:
    """Handle get command."""
    if args.type == "raw":
        if args.key not in group and args.default is None:
            formatter.error(f"Option {args.key} is not set in {group.name}")
            sys.exit(1)
        print(format_value(group.get_option(args.key, args.default)))
        return

    getter = TYPED_GETTERS[args.type](group)
    if args.default is None:
        print(format_value(getter(args.key)))
    else:
        print(format_value(getter(args.key, args.default)))


def set_command(
    args: argparse.Namespace,
    group: OptionsGroup,
    host: SettingsHost,
    formatter: OutputFormatter,
) -> None:
    """Handle set command."""
    value: Any = args.value
    if args.json_value:
        try:
            value = json.loads(args.value)
        except json.JSONDecodeError as e:
            formatter.error(f"Value is not valid JSON: {e}")
            sys.exit(1)

    if not group.set_option(args.key, value):
        formatter.error(f"Failed to save {group.name}")
        sys.exit(1)

    if args.key in group:
        formatter.success(f"{group.name}.{args.key} = {format_value(group.get_option(args.key))}")
    else:
        formatter.warning(f"{group.name}.{args.key} was empty and has been removed")


def unset_command(
    args: argparse.Namespace,
    group: OptionsGroup,
    host: SettingsHost,
    formatter: OutputFormatter,
) -> None:
    """Handle unset command."""
    if args.key not in group:
        formatter.info(f"Option {args.key} is not set in {group.name}")
        return

    if not group.unset_option(args.key):
        formatter.error(f"Failed to save {group.name}")
        sys.exit(1)
    formatter.success(f"Removed {group.name}.{args.key}")


def merge_command(
    args: argparse.Namespace,
    group: OptionsGroup,
    host: SettingsHost,
    formatter: OutputFormatter,
) -> None:
    """Handle merge command.

    The payload goes through the host's save pipeline exactly as a settings
    form submission would, so the group's sanitize callback does the merge.
    """
    try:
        payload = json.loads(args.payload)
    except json.JSONDecodeError as e:
        formatter.error(f"Payload is not valid JSON: {e}")
        sys.exit(1)

    if not isinstance(payload, dict):
        formatter.error("Payload must be a JSON object")
        sys.exit(1)

    if not host.save(group.name, args.payload):
        formatter.error(f"Failed to save {group.name}")
        sys.exit(1)

    formatter.success(f"Merged into {group.name} ({len(group)} options)")
    formatter.options_table(group.values)
