"""Prompt fragment collection, assembly, and validation."""

from __future__ import annotations

from typing import Callable, NamedTuple

from prompt_changer.utils import info, read_line

DEFAULT_PARTS = 4

# Bash's non-root prompt terminator, appended for every shell
TRAILING_MARKER = "\\$"

INVALID_PROMPT_MESSAGE = "The prompt contains invalid characters."

LEGEND_LINES = [
    "bash命令行提示符的组成要素:",
    "\\u (当前登录用户名), \\h (主机名的简称), \\w (当前工作目录)",
    "\\v (版本号), \\H (完整的主机名), \\W (当前工作目录的最后一部分)",
    "\\T (当前时间,12小时制), \\A (当前时间，格式为 “HH:MM:SS”)",
    "\\t (当前时间,24小时制), \\@ (当前时间，格式为 “HH:MM”)",
    "\\d (当前日期，格式为 “Weekday Month Day”)",
    "常用的文本颜色编码:",
    "\\[\\e[30m\\](黑色), \\[\\e[31m\\](红色), \\[\\e[32m\\](绿色), \\[\\e[33m\\](黄色)",
    "\\[\\e[34m\\](蓝色), \\[\\e[35m\\](洋红), \\[\\e[36m\\](青色), \\[\\e[37m\\](白色)",
]

Reader = Callable[[str], str]


class PromptFragment(NamedTuple):
    """One user-supplied piece of the prompt: an escape sequence and a color code."""

    color: str
    name: str


class InvalidPromptError(ValueError):
    """Raised when an assembled prompt contains control characters."""


def print_legend() -> None:
    """Print the cheat sheet of Bash prompt escapes and ANSI colors."""
    info("\n\n".join(LEGEND_LINES))


def collect_fragments(count: int = DEFAULT_PARTS, read: Reader = read_line) -> list[PromptFragment]:
    """Ask for a name and then a color, `count` times, in order.

    Read errors (EOFError, OSError) propagate to the caller.
    """
    fragments = []
    for i in range(1, count + 1):
        name = read(f"请输入第{i}部分要素:")
        color = read(f"请输入第{i}部分要素颜色:")
        fragments.append(PromptFragment(color=color, name=name))
    return fragments


def read_single_prompt(read: Reader = read_line) -> str:
    """Read a complete prompt format in one line."""
    return read("Enter the new prompt format: ")


def assemble_prompt(fragments: list[PromptFragment]) -> str:
    """Concatenate color+name+" " per fragment and append the trailing marker."""
    body = "".join(f"{f.color}{f.name} " for f in fragments)
    return body + TRAILING_MARKER


def is_control_char(ch: str) -> bool:
    code = ord(ch)
    return code <= 0x1F or code == 0x7F


def validate_prompt(prompt: str) -> str:
    """Return the prompt unchanged, or raise InvalidPromptError if it has control characters."""
    if any(is_control_char(ch) for ch in prompt):
        raise InvalidPromptError(INVALID_PROMPT_MESSAGE)
    return prompt
