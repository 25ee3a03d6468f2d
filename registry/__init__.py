"""Provider registry and dependency injection container for OptionsGroup."""

from typing import Any, Dict, Optional

from loguru import logger

from core.exceptions import OptionsGroupError, ProviderError
from core.types import StoreBackend
from providers.database.duckdb_provider import DuckDBOptionStore
from providers.host.settings_host import SettingsHost
from providers.stores.json_store import JsonFileOptionStore
from providers.stores.memory_store import InMemoryOptionStore
from services.options_group import OptionsGroup

DEFAULT_STORE_PATHS = {
    StoreBackend.JSON: "options.json",
    StoreBackend.DUCKDB: "options.duckdb",
}


class ProviderRegistry:
    """Registry for managing provider implementations and dependency injection."""

    def __init__(self):
        """Initialize the provider registry."""
        self._providers: Dict[str, Any] = {}
        self._singletons: Dict[str, Any] = {}
        self._groups: Dict[str, OptionsGroup] = {}
        self._config: Dict[str, Any] = {}

        # Register default providers
        self._register_default_providers()

    def configure(self, config: Dict[str, Any]) -> None:
        """Configure the registry with application settings.

        Args:
            config: Configuration dictionary, typically ``OptionsGroupConfig.to_dict()``
        """
        self._config = config.copy()

        # Register the store after configuration is available
        self._register_store_provider()

        logger.info("Provider registry configured")

    def register_provider(self, name: str, implementation: Any, singleton: bool = True) -> None:
        """Register a provider implementation.

        Args:
            name: Provider name/identifier
            implementation: Concrete implementation class or instance
            singleton: Whether to use singleton pattern for this provider
        """
        self._providers[name] = (implementation, singleton)

        # Clear existing singleton if registered
        if singleton and name in self._singletons:
            del self._singletons[name]

        # The host wraps the store, and groups wrap the host
        if name == "store":
            self._singletons.pop("host", None)
        self._groups.clear()

        impl_name = getattr(implementation, "__name__", type(implementation).__name__)
        logger.debug(f"Registered {impl_name} as {name}")

    def get_provider(self, name: str) -> Any:
        """Get a provider instance for the specified name.

        Args:
            name: Provider name to get

        Returns:
            Provider instance

        Raises:
            ProviderError: If no provider is registered for the name
        """
        if name not in self._providers:
            raise ProviderError(name, "No provider registered")

        implementation, is_singleton = self._providers[name]

        if is_singleton:
            if name not in self._singletons:
                self._singletons[name] = self._create_instance(implementation)
            return self._singletons[name]
        else:
            return self._create_instance(implementation)

    def create_settings_host(self) -> SettingsHost:
        """Get the settings host wrapping the configured store.

        Returns:
            Shared SettingsHost instance
        """
        return self.get_provider("host")

    def create_options_group(self, name: str) -> OptionsGroup:
        """Create (or return the cached) settings group bound to the shared host.

        Args:
            name: Group name

        Returns:
            OptionsGroup using the host as both store and registrar
        """
        key = name.strip()
        if key not in self._groups:
            host = self.create_settings_host()
            self._groups[key] = OptionsGroup(key, host, host)
        return self._groups[key]

    def close(self) -> None:
        """Release provider resources such as database connections."""
        store = self._singletons.get("store")
        if store is not None and hasattr(store, "disconnect"):
            store.disconnect()
        self._singletons.clear()
        self._groups.clear()

    def _register_default_providers(self) -> None:
        """Register default provider implementations."""
        self.register_provider("store", InMemoryOptionStore, singleton=True)
        self.register_provider("host", SettingsHost, singleton=True)

    def _register_store_provider(self) -> None:
        """Register the store implementation named in the configuration."""
        store_config = self._config.get("store", {})
        backend_name = store_config.get("backend", StoreBackend.MEMORY.value)

        try:
            backend = StoreBackend(backend_name)
        except ValueError:
            raise ProviderError("store", f"Unsupported store backend: {backend_name}")

        previous = self._singletons.get("store")
        if previous is not None and hasattr(previous, "disconnect"):
            previous.disconnect()

        implementations = {
            StoreBackend.MEMORY: InMemoryOptionStore,
            StoreBackend.JSON: JsonFileOptionStore,
            StoreBackend.DUCKDB: DuckDBOptionStore,
        }
        self.register_provider("store", implementations[backend], singleton=True)

    def _store_path(self, backend: StoreBackend) -> str:
        path = self._config.get("store", {}).get("path")
        return path or DEFAULT_STORE_PATHS[backend]

    def _create_instance(self, cls: Any) -> Any:
        """Create an instance with basic dependency injection.

        Args:
            cls: Class to instantiate

        Returns:
            Instance with dependencies injected
        """
        if not isinstance(cls, type):
            # Already an instance
            return cls

        try:
            if cls is DuckDBOptionStore:
                store_config = self._config.get("store", {})
                instance = cls(
                    self._store_path(StoreBackend.DUCKDB),
                    autoload=store_config.get("autoload", True),
                )
                instance.connect()
                return instance
            elif cls is JsonFileOptionStore:
                return cls(self._store_path(StoreBackend.JSON))
            elif cls is SettingsHost:
                return cls(self.get_provider("store"))
            else:
                return cls()
        except OptionsGroupError as e:
            logger.error(f"Failed to create instance of {cls.__name__}: {e}")
            if "provider" not in e.context:
                e.add_context("provider", cls.__name__)
            raise
        except Exception as e:
            logger.error(f"Failed to create instance of {cls.__name__}: {e}")
            raise


# Global registry instance
_registry: Optional[ProviderRegistry] = None


def get_registry() -> ProviderRegistry:
    """Get the global provider registry instance.

    Returns:
        Global ProviderRegistry instance
    """
    global _registry
    if _registry is None:
        _registry = ProviderRegistry()
    return _registry


def configure_registry(config: Dict[str, Any]) -> ProviderRegistry:
    """Configure the global provider registry.

    Args:
        config: Configuration dictionary

    Returns:
        The configured global registry
    """
    registry = get_registry()
    registry.configure(config)
    return registry


def reset_registry() -> None:
    """Close and drop the global registry instance."""
    global _registry
    if _registry is not None:
        _registry.close()
    _registry = None


__all__ = [
    "ProviderRegistry",
    "get_registry",
    "configure_registry",
    "reset_registry",
]
