"""OptionsGroup API package - command-line surface."""
