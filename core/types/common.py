"""OptionsGroup Core Types - Common type definitions and aliases.

Option values form a small tagged union: a scalar, a nested mapping of option
values, or a sequence of option values. Pruning and coercion dispatch on these
three shapes.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, NewType, Union


# String-based type aliases for better semantic clarity
GroupName = NewType("GroupName", str)      # e.g., "my_plugin_settings"

# Value shapes
OptionScalar = Union[str, int, float, bool, None]
OptionValue = Union[OptionScalar, Dict[str, Any], List[Any]]
OptionMapping = Dict[str, OptionValue]

# Numeric results of the lossy coercions
Number = Union[int, float]

# Callback types exchanged with the host
SanitizeCallback = Callable[[Any], OptionMapping]
ActionCallback = Callable[..., Any]

# Sentinel written by forms to request removal of a key on save
UNSET_SENTINEL = "_unset_"

DEFAULT_PRIORITY = 10


class LifecycleEvent(Enum):
    """Host lifecycle points that components can subscribe to."""

    INIT = "init"
    ADMIN_INIT = "admin_init"
    SHUTDOWN = "shutdown"


class StoreBackend(Enum):
    """Persistence backends available to the provider registry."""

    MEMORY = "memory"
    JSON = "json"
    DUCKDB = "duckdb"

    @property
    def is_file_based(self) -> bool:
        """Check whether this backend persists to a path on disk."""
        return self in {StoreBackend.JSON, StoreBackend.DUCKDB}
