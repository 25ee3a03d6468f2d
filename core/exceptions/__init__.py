"""OptionsGroup Core Exceptions Package - Core exception classes for error handling.

The settings group is total over its input and raises nothing. The exceptions
here belong to the layers around it: configuration loading, store setup and
provider resolution.
"""

from .core import (
    ConfigurationError,
    OptionsGroupError,
    ProviderError,
    StoreError,
    ValidationError,
)

__all__ = [
    # Base exception
    "OptionsGroupError",

    # Domain-specific exceptions
    "ConfigurationError",
    "StoreError",
    "ProviderError",
    "ValidationError",
]
