"""Output formatting utilities for OptionsGroup CLI commands."""

import json
import sys
from typing import Any, Dict


class OutputFormatter:
    """Handles consistent output formatting across CLI commands."""

    def __init__(self, verbose: bool = False):
        """Initialize output formatter.

        Args:
            verbose: Whether to enable verbose output
        """
        self.verbose = verbose

    def info(self, message: str) -> None:
        """Print an info message."""
        print(f"ℹ️  {message}")

    def success(self, message: str) -> None:
        """Print a success message."""
        print(f"✅ {message}")

    def warning(self, message: str) -> None:
        """Print a warning message."""
        print(f"⚠️  {message}")

    def error(self, message: str) -> None:
        """Print an error message to stderr."""
        print(f"❌ {message}", file=sys.stderr)

    def verbose_info(self, message: str) -> None:
        """Print a verbose info message if verbose mode is enabled."""
        if self.verbose:
            print(f"🔍 {message}")

    def json_output(self, data: Dict[str, Any]) -> None:
        """Print data as formatted JSON.

        Args:
            data: Data to output as JSON
        """
        print(json.dumps(data, indent=2, default=str))

    def options_table(self, values: Dict[str, Any]) -> None:
        """Print a two-column key/value listing.

        Args:
            values: Mapping of option keys to values
        """
        if not values:
            self.info("Group is empty.")
            return

        width = max(len(key) for key in values)
        for key in sorted(values):
            print(f"  {key.ljust(width)}  {format_value(values[key])}")


def format_value(value: Any) -> str:
    """Render an option value for terminal display.

    Scalars print as-is, containers as compact JSON.
    """
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True, default=str)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)
