"""CLI entry point: argparse setup and the prompt pipeline."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from prompt_changer import __version__
from prompt_changer.prompt import (
    DEFAULT_PARTS,
    InvalidPromptError,
    Reader,
    assemble_prompt,
    collect_fragments,
    print_legend,
    read_single_prompt,
    validate_prompt,
)
from prompt_changer.shell import SHELLS, append_prompt, get_shell, success_message
from prompt_changer.utils import error, info, read_line


def run(args: argparse.Namespace, read: Reader = read_line, parts: int = DEFAULT_PARTS) -> int:
    """Collect, validate and write the prompt. Returns the process exit status."""
    print_legend()

    try:
        if args.single_line:
            new_prompt = read_single_prompt(read)
        else:
            new_prompt = assemble_prompt(collect_fragments(parts, read))
    except (EOFError, OSError, UnicodeError) as exc:
        error(str(exc) or "unexpected end of input", context="reading prompt")
        return 1

    try:
        validate_prompt(new_prompt)
    except InvalidPromptError as exc:
        error(str(exc))
        return 1

    config_path = Path(args.config_file).expanduser() if args.config_file else None
    try:
        append_prompt(args.shell, new_prompt, config_path)
    except (OSError, RuntimeError, UnicodeError) as exc:
        error(str(exc), context=f"updating {get_shell(args.shell).DISPLAY_NAME} prompt")
        return 1

    info(success_message(args.shell))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prompt-changer",
        description="Change the command prompt in Bash or Fish.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-s", "--shell",
        required=True,
        choices=sorted(SHELLS),
        metavar="SHELL",
        help="Choose the shell to change the prompt for (bash or fish)",
    )
    parser.add_argument(
        "--config-file",
        help="Append to this file instead of the shell's default config",
    )
    parser.add_argument(
        "--single-line",
        action="store_true",
        help="Enter the whole prompt format on one line",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    sys.exit(run(args))
