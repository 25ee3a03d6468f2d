"""In-process settings host for OptionsGroup.

SettingsHost plays the part of the application that owns the option store:
components schedule lifecycle actions on it, register per-group sanitize
callbacks, and persist groups through it. It satisfies both the
HookRegistrar and OptionStore protocols, so a settings group can use one
SettingsHost for both collaborators.
"""

import itertools
from collections.abc import Mapping
from typing import Any, Dict, List, Tuple

from loguru import logger

from core.sanitize import decode_options, looks_serialized
from core.types import (
    DEFAULT_PRIORITY,
    ActionCallback,
    LifecycleEvent,
    OptionMapping,
    SanitizeCallback,
)
from interfaces.option_store import OptionStore


class SettingsHost:
    """Lifecycle hook table and sanitize-on-save pipeline over an OptionStore."""

    def __init__(self, store: OptionStore):
        """Initialize the host.

        Args:
            store: Store the host persists groups to
        """
        self._store = store
        self._actions: Dict[LifecycleEvent, List[Tuple[int, int, ActionCallback]]] = {}
        self._sanitizers: Dict[str, SanitizeCallback] = {}
        self._fired: Dict[LifecycleEvent, int] = {}
        self._sequence = itertools.count()

    @property
    def store(self) -> OptionStore:
        """Store wrapped by this host."""
        return self._store

    # Lifecycle actions

    def add_action(
        self,
        event: LifecycleEvent,
        callback: ActionCallback,
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Schedule a callback for a lifecycle event.

        Lower priorities run first; equal priorities run in registration
        order. Adding the same callback twice for one event is a no-op.
        """
        entries = self._actions.setdefault(event, [])
        if any(existing == callback for _, _, existing in entries):
            return
        entries.append((priority, next(self._sequence), callback))

    def remove_action(self, event: LifecycleEvent, callback: ActionCallback) -> bool:
        """Unschedule a callback. Returns False if it was not scheduled."""
        entries = self._actions.get(event, [])
        for index, (_, _, existing) in enumerate(entries):
            if existing == callback:
                del entries[index]
                return True
        return False

    def has_action(self, event: LifecycleEvent, callback: ActionCallback | None = None) -> bool:
        """Check whether anything (or a specific callback) is scheduled for an event."""
        entries = self._actions.get(event, [])
        if callback is None:
            return bool(entries)
        return any(existing == callback for _, _, existing in entries)

    def do_action(self, event: LifecycleEvent, *args: Any) -> int:
        """Run every callback scheduled for an event.

        A failing callback is logged and the remaining callbacks still run.

        Returns:
            Number of callbacks that completed
        """
        self._fired[event] = self._fired.get(event, 0) + 1
        completed = 0

        for _, _, callback in sorted(self._actions.get(event, []), key=lambda entry: entry[:2]):
            try:
                callback(*args)
                completed += 1
            except Exception as e:
                logger.error(f"Error in {event.value} action {callback!r}: {e}")

        logger.debug(f"Fired {event.value}: {completed} action(s) completed")
        return completed

    def did_action(self, event: LifecycleEvent) -> int:
        """Return how many times an event has been fired."""
        return self._fired.get(event, 0)

    # Settings registration

    def register_setting(self, name: str, sanitize_callback: SanitizeCallback) -> None:
        """Register the sanitize callback run before a group is persisted."""
        name = name.strip()
        if name in self._sanitizers:
            logger.debug(f"Replacing sanitize callback for group {name}")
        self._sanitizers[name] = sanitize_callback
        logger.info(f"Registered setting {name}")

    def unregister_setting(self, name: str) -> bool:
        """Drop the sanitize callback for a group."""
        return self._sanitizers.pop(name.strip(), None) is not None

    def has_setting(self, name: str) -> bool:
        """Check whether a group has a registered sanitize callback."""
        return name.strip() in self._sanitizers

    # OptionStore surface

    def load(self, name: str, default: Any = None) -> Any:
        return self._store.load(name, default)

    def save(self, name: str, value: Any) -> bool:
        """Persist a group, running its sanitize callback first when one is registered.

        Serialized payloads are decoded before the callback sees them. The
        callback runs exactly once and its return value is what gets stored.
        """
        if looks_serialized(value):
            value = decode_options(value)

        sanitizer = self._sanitizers.get(name)
        if sanitizer is not None:
            value = sanitizer(value)
        elif not isinstance(value, Mapping):
            value = decode_options(value)

        persisted: OptionMapping = dict(value)
        return self._store.save(name, persisted)

    def delete(self, name: str) -> bool:
        return self._store.delete(name)

    def exists(self, name: str) -> bool:
        return self._store.exists(name)
