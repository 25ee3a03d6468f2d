"""Settings group service for OptionsGroup - typed access to one named group of options."""

from collections.abc import Mapping
from typing import Any, Dict, Optional

from loguru import logger

from core import coercion
from core.sanitize import decode_options, merge_and_prune
from core.types import GroupName, LifecycleEvent, Number, OptionMapping
from interfaces.hook_registrar import HookRegistrar
from interfaces.option_store import OptionStore
from .base_service import BaseService


class OptionsGroup(BaseService):
    """A named group of options persisted as a single mapping.

    The group loads its mapping once on construction and keeps it in memory.
    Writes persist the whole mapping. When a registrar is supplied, the group
    schedules itself for the host's ``admin_init`` event and, once that fires,
    registers ``merge_and_sanitize`` as the group's pre-save callback.
    """

    def __init__(
        self,
        name: str,
        store: OptionStore,
        registrar: Optional[HookRegistrar] = None
    ):
        """Initialize the group and load its stored values.

        Args:
            name: Group name, the key into the store (surrounding whitespace is trimmed)
            store: Store the group reads from and writes to
            registrar: Optional host registrar for lifecycle and sanitize hooks
        """
        super().__init__(store)
        self.name = GroupName(name.strip())
        self._registrar = registrar
        self._values: OptionMapping = self._load_values()

        if registrar is not None:
            registrar.add_action(LifecycleEvent.ADMIN_INIT, self.register_setting)

    def __repr__(self) -> str:
        return f"OptionsGroup({self.name!r}, {len(self._values)} options)"

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    @property
    def values(self) -> OptionMapping:
        """Shallow copy of the current in-memory mapping."""
        return dict(self._values)

    def _load_values(self) -> OptionMapping:
        stored = self._store.load(self.name, {})
        if isinstance(stored, Mapping):
            return dict(stored)
        # Anything else is treated as an empty group unless it decodes to one
        return decode_options(stored) if isinstance(stored, (str, bytes)) else {}

    def reload(self) -> OptionMapping:
        """Re-read the group from the store, discarding in-memory changes."""
        self._values = self._load_values()
        return self.values

    def to_dict(self) -> Dict[str, Any]:
        """Return a snapshot of the group for display or export."""
        return {"name": self.name, "values": self.values}

    # Writes

    def set_option(self, key: str, value: Any) -> bool:
        """Set an option and persist the whole group.

        Returns:
            Whether the store accepted the write
        """
        self._values[key] = value
        saved = self._store.save(self.name, dict(self._values))
        if not saved:
            logger.warning(f"Store rejected write of {self.name}.{key}")
        return saved

    def unset_option(self, key: str) -> bool:
        """Remove an option and persist the whole group."""
        self._values.pop(key, None)
        return self._store.save(self.name, dict(self._values))

    # Reads

    def get_option(self, key: str, default: Any = False) -> Any:
        """Return the raw option value, or ``default`` when the key is missing."""
        return self._values.get(key, default)

    def get_bool_option(self, key: str, default: Any = False) -> bool:
        return coercion.to_bool(self.get_option(key, default))

    def get_int_option(self, key: str, default: Any = 0) -> int:
        return coercion.to_int(self.get_option(key, default))

    def get_absint_option(self, key: str, default: Any = 0) -> int:
        return coercion.to_absint(self.get_option(key, default))

    def get_abs_option(self, key: str, default: Any = 0) -> Number:
        return coercion.to_abs(self.get_option(key, default))

    def get_float_option(self, key: str, default: Any = 0) -> float:
        return coercion.to_float(self.get_option(key, default))

    # Host integration

    def merge_and_sanitize(self, new_value: Any) -> OptionMapping:
        """Merge an incoming value over the current group and prune it.

        This is the callback the host runs right before persisting the group.
        ``new_value`` may be a mapping or a serialized JSON object. Incoming
        keys overwrite current ones, missing keys are kept, then empty and
        "_unset_" entries are removed at every depth. The in-memory mapping
        is replaced by the result.

        Returns:
            The mapping the host should persist
        """
        self._values = merge_and_prune(self._values, new_value)
        logger.debug(f"Sanitized group {self.name}: {len(self._values)} options kept")
        return dict(self._values)

    def register_setting(self) -> None:
        """Register ``merge_and_sanitize`` with the host for this group."""
        if self._registrar is None:
            return
        self._registrar.register_setting(self.name, self.merge_and_sanitize)
