"""OptionsGroup test package."""
