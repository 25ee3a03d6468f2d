"""Option command argument parsers for OptionsGroup CLI."""

import argparse

from .main_parser import add_common_arguments, add_store_arguments

VALUE_TYPES = ["raw", "bool", "int", "absint", "abs", "float"]


def _add_command(subparsers, name: str, help_text: str) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(name, help=help_text, description=help_text)
    add_common_arguments(parser)
    add_store_arguments(parser)
    return parser


def add_option_subparsers(subparsers) -> None:
    """Add the show/get/set/unset/merge command subparsers.

    Args:
        subparsers: Subparsers object from the main argument parser
    """
    show_parser = _add_command(subparsers, "show", "Show every option in a group")
    show_parser.add_argument(
        "--json",
        action="store_true",
        help="Output the group as JSON",
    )

    get_parser = _add_command(subparsers, "get", "Read one option")
    get_parser.add_argument("key", help="Option key")
    get_parser.add_argument(
        "--type",
        choices=VALUE_TYPES,
        default="raw",
        help="Coercion applied to the value (default: raw)",
    )
    get_parser.add_argument(
        "--default",
        default=None,
        help="Value returned when the option is missing",
    )

    set_parser = _add_command(subparsers, "set", "Set one option and save the group")
    set_parser.add_argument("key", help="Option key")
    set_parser.add_argument("value", help="Option value")
    set_parser.add_argument(
        "--json-value",
        action="store_true",
        help="Parse the value as JSON instead of storing it as text",
    )

    unset_parser = _add_command(subparsers, "unset", "Remove one option and save the group")
    unset_parser.add_argument("key", help="Option key")

    merge_parser = _add_command(
        subparsers, "merge", "Merge a JSON object into the group through the save pipeline"
    )
    merge_parser.add_argument("payload", help="JSON object to merge")
