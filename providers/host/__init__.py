"""Host providers package for OptionsGroup - in-process lifecycle and save pipeline."""

from .settings_host import SettingsHost

__all__ = [
    "SettingsHost",
]
