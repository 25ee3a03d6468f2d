"""OptionsGroup CLI package - inspect and edit option groups from the shell."""

from .main import main

__all__ = ["main"]
