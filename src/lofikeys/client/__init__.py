"""Client module - Device identity and command-line interface."""
