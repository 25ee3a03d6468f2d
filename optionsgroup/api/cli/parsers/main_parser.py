"""Main argument parser for OptionsGroup CLI."""

import argparse
from pathlib import Path


def create_main_parser() -> argparse.ArgumentParser:
    """Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from optionsgroup import __version__

    parser = argparse.ArgumentParser(
        prog="optionsgroup",
        description="Inspect and edit grouped options in an option store",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  optionsgroup show --group my_plugin
  optionsgroup get enable_cache --group my_plugin --type bool
  optionsgroup set per_page 20 --group my_plugin
  optionsgroup set colors '{"primary": "#333"}' --json-value --group my_plugin
  optionsgroup merge '{"legacy_flag": "_unset_"}' --group my_plugin
  optionsgroup show --group my_plugin --backend duckdb --store-path ./options.duckdb
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"optionsgroup {__version__}",
    )

    return parser


def setup_subparsers(parser: argparse.ArgumentParser) -> argparse._SubParsersAction:
    """Set up subparsers for the main parser.

    Args:
        parser: Main argument parser

    Returns:
        Subparsers action for adding command parsers
    """
    return parser.add_subparsers(dest="command", help="Available commands")


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add common arguments used across every command.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Configuration file path",
    )

    parser.add_argument(
        "--group", "-g",
        help="Option group name (defaults to default_group from configuration)",
    )


def add_store_arguments(parser: argparse.ArgumentParser) -> None:
    """Add option store arguments to a parser.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "--backend",
        choices=["memory", "json", "duckdb"],
        help="Option store backend (overrides configuration)",
    )

    parser.add_argument(
        "--store-path",
        type=Path,
        help="Option store file path (overrides configuration)",
    )


__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_common_arguments",
    "add_store_arguments",
]
