"""OptionsGroup Core Exceptions - Core exception classes for error handling.

This module contains the exception hierarchy for the OptionsGroup library. The
settings group itself never raises; these exceptions cover the ambient layers
around it (configuration loading, store setup and provider lookup).
"""

from typing import Optional, Any, Dict


class OptionsGroupError(Exception):
    """Base exception for all OptionsGroup-specific errors.

    This is the root exception class that all other OptionsGroup exceptions
    inherit from. It carries an optional context dictionary and the
    underlying cause for debugging.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize OptionsGroup error.

        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., group name, store path)
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message

    def add_context(self, key: str, value: Any) -> "OptionsGroupError":
        """Add context information to the error."""
        self.context[key] = value
        return self


class StoreError(OptionsGroupError):
    """Raised when an option store cannot be opened or initialized.

    Individual reads and writes never raise; they report failure through
    their return value. This exception covers setup problems such as an
    unreachable database file.
    """

    def __init__(
        self,
        store: Optional[str] = None,
        operation: Optional[str] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize store error.

        Args:
            store: Store implementation name (e.g., "duckdb", "json")
            operation: Operation that failed (e.g., "connect", "create_schema")
            reason: Description of what went wrong
            context: Optional additional context
            cause: Optional underlying exception
        """
        parts = []
        if store:
            parts.append(f"store={store}")
        if operation:
            parts.append(f"operation={operation}")

        prefix = f"Store error ({', '.join(parts)})" if parts else "Store error"
        message = f"{prefix}: {reason}" if reason else prefix

        super().__init__(message, context, cause)
        self.store = store
        self.operation = operation
        self.reason = reason


class ConfigurationError(OptionsGroupError):
    """Raised when configuration is invalid or missing.

    This exception is used for errors related to configuration files,
    environment variables, or invalid configuration values.
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize configuration error.

        Args:
            config_key: Configuration key that caused the error
            config_value: Invalid configuration value
            reason: Description of what went wrong
            context: Optional additional context
            cause: Optional underlying exception
        """
        if config_key:
            message = f"Configuration error for '{config_key}': {reason}"
        else:
            message = f"Configuration error: {reason}" if reason else "Configuration error"

        super().__init__(message, context, cause)
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason


class ProviderError(OptionsGroupError):
    """Raised when a provider cannot be resolved from the registry."""

    def __init__(
        self,
        provider: Optional[str] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize provider error.

        Args:
            provider: Provider name that failed to resolve
            reason: Description of what went wrong
            context: Optional additional context
        """
        prefix = f"Provider error (provider={provider})" if provider else "Provider error"
        message = f"{prefix}: {reason}" if reason else prefix

        super().__init__(message, context)
        self.provider = provider
        self.reason = reason


class ValidationError(OptionsGroupError):
    """Raised when model data fails validation.

    This exception is used when a record read from a store or built by
    callers does not meet the expected shape.
    """

    def __init__(
        self,
        field: str,
        value: Any,
        reason: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize validation error.

        Args:
            field: Name of the field that failed validation
            value: The invalid value
            reason: Description of why validation failed
            context: Optional additional context
        """
        message = f"Validation failed for field '{field}': {reason}"
        super().__init__(message, context)
        self.field = field
        self.value = value
        self.reason = reason
