"""OptionsGroup application core - configuration for the library and CLI."""
