"""Shell config management: resolve the startup file and append a prompt line."""

from __future__ import annotations

import os
from pathlib import Path
from types import ModuleType

from prompt_changer.shells import bash, fish

SHELLS: dict[str, ModuleType] = {
    bash.SHELL_NAME: bash,
    fish.SHELL_NAME: fish,
}


def get_shell(shell: str) -> ModuleType:
    """Look up the settings module for a shell name."""
    try:
        return SHELLS[shell]
    except KeyError:
        raise ValueError(f"Unsupported shell: {shell}") from None


def _home_dir() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        raise RuntimeError("Failed to get home directory") from None


def config_path_for(shell: str, home: Path | None = None) -> Path:
    """Return the startup file for a shell, under the user's home by default."""
    if home is None:
        home = _home_dir()
    return home / get_shell(shell).CONFIG_PATH


def format_prompt_line(shell: str, prompt: str) -> str:
    """Build the assignment line for a shell. Single quotes are not escaped."""
    return get_shell(shell).LINE_TEMPLATE.format(prompt=prompt)


def success_message(shell: str) -> str:
    return f"{get_shell(shell).DISPLAY_NAME} prompt updated successfully."


def append_prompt(shell: str, prompt: str, config_path: Path | None = None) -> Path:
    """Append one prompt line to the shell's config file. Returns the file written.

    The file must already exist: it is opened without O_CREAT, so a missing
    file or directory raises FileNotFoundError and nothing is created.
    """
    if config_path is None:
        config_path = config_path_for(shell)

    # UnicodeEncodeError surfaces here, before the file is opened
    data = f"{format_prompt_line(shell, prompt)}\n".encode("utf-8")
    fd = os.open(config_path, os.O_WRONLY | os.O_APPEND)
    with os.fdopen(fd, "ab") as f:
        f.write(data)
    return config_path
