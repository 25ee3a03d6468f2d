"""OptionsGroup - grouped configuration values over a pluggable key-value store."""

__version__ = "0.1.0"
__description__ = "Grouped configuration values with typed getters and sanitize-on-save"

# Import modules only when needed to avoid dependency issues during setup
__all__ = [
    "OptionsGroup",
    "SettingsHost",
    "OptionsGroupConfig",
]


def __getattr__(name: str):
    """Lazy import to avoid dependency issues during setup."""
    if name == "OptionsGroup":
        from services.options_group import OptionsGroup
        return OptionsGroup
    elif name == "SettingsHost":
        from providers.host.settings_host import SettingsHost
        return SettingsHost
    elif name == "OptionsGroupConfig":
        from .core.config import OptionsGroupConfig
        return OptionsGroupConfig
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
