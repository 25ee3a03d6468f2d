"""OptionsGroup CLI commands package - command implementations."""

from .options import option_command

__all__ = [
    "option_command",
]
