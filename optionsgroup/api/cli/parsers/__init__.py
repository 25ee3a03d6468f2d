"""Argument parser utilities for OptionsGroup CLI commands."""

from .main_parser import create_main_parser, setup_subparsers
from .options_parser import add_option_subparsers

__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_option_subparsers",
]
