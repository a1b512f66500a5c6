"""Console helpers: info/error output and line input."""

from __future__ import annotations

import sys


def read_line(message: str) -> str:
    """Print a prompt on its own line and return the stripped reply.

    Raises EOFError when stdin is closed.
    """
    print(message, flush=True)
    return input().strip()


def error(message: str, context: str | None = None) -> None:
    """Print an error message to stderr.

    With a context the line reads "Error <context>: <message>".
    """
    prefix = f"Error {context}" if context else "Error"
    print(f"{prefix}: {message}", file=sys.stderr)


def info(message: str) -> None:
    """Print an info message."""
    print(message)
