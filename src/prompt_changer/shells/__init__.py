"""Per-shell constants: config file location and prompt line syntax."""
