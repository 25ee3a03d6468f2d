"""HookRegistrar protocol for OptionsGroup - lifecycle and save-pipeline registration."""

from typing import Protocol

from core.types import ActionCallback, LifecycleEvent, SanitizeCallback


class HookRegistrar(Protocol):
    """Abstract protocol for the host's hook registration surface.

    Components receive a registrar at construction time instead of reaching
    for a process-wide hook table.
    """

    def add_action(
        self,
        event: LifecycleEvent,
        callback: ActionCallback,
        priority: int = 10,
    ) -> None:
        """Schedule ``callback`` to run when the host reaches ``event``."""
        ...

    def register_setting(self, name: str, sanitize_callback: SanitizeCallback) -> None:
        """Register the callback the host runs on a group's value before persisting it.

        The host invokes it exactly once per save, synchronously, with the raw
        incoming value, and persists whatever it returns.
        """
        ...
