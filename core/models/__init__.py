"""OptionsGroup Core Models Package - Domain model definitions.

The models follow these principles:
- Immutable data structures using dataclasses with frozen=True
- Clear separation between domain logic and persistence concerns
- Dictionary conversion for stores and the CLI
"""

from .option import StoredOption

__all__ = [
    "StoredOption",
]
