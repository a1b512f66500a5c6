"""Interactive Bash/Fish prompt builder."""

__version__ = "0.1.0"
