"""OptionsGroup Core Types Package - Common type definitions and aliases.

The types are organized into logical groups:
- Option value shapes (scalar, mapping, sequence)
- Lifecycle and backend enumerations
- Callback signatures exchanged with the host
"""

from .common import (
    DEFAULT_PRIORITY,
    UNSET_SENTINEL,
    ActionCallback,
    GroupName,
    LifecycleEvent,
    Number,
    OptionMapping,
    OptionScalar,
    OptionValue,
    SanitizeCallback,
    StoreBackend,
)

__all__ = [
    # Enums
    "LifecycleEvent",
    "StoreBackend",

    # String types
    "GroupName",

    # Value shapes
    "OptionScalar",
    "OptionValue",
    "OptionMapping",
    "Number",

    # Callbacks
    "SanitizeCallback",
    "ActionCallback",

    # Constants
    "UNSET_SENTINEL",
    "DEFAULT_PRIORITY",
]
