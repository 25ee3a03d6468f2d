"""OptionsGroup Core Package - Domain models, types, helpers and exceptions.

This package contains the pieces every other layer builds on. None of it
touches a store or the host; it is plain data and pure functions.

Modules:
    models: StoredOption record for persisted groups
    types: Option value shapes, enums and callback aliases
    coercion: Lossy conversions used by the typed accessors
    sanitize: Decode, merge and prune helpers
    exceptions: Exception hierarchy for the ambient layers
"""

from .exceptions import (
    ConfigurationError,
    OptionsGroupError,
    ProviderError,
    StoreError,
    ValidationError,
)
from .models import StoredOption
from .types import GroupName, LifecycleEvent, StoreBackend, UNSET_SENTINEL

__all__ = [
    # Domain Models
    "StoredOption",

    # Types
    "GroupName",
    "LifecycleEvent",
    "StoreBackend",
    "UNSET_SENTINEL",

    # Exceptions
    "OptionsGroupError",
    "ConfigurationError",
    "StoreError",
    "ProviderError",
    "ValidationError",
]

__version__ = "0.1.0"
