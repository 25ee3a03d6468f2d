"""Interfaces package for OptionsGroup - abstract protocols for host collaborators."""

from .hook_registrar import HookRegistrar
from .option_store import OptionStore

__all__ = [
    "HookRegistrar",
    "OptionStore",
]
