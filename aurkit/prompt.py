"""Interactive yes/no, free-text and provider-number prompts."""

from __future__ import annotations

import sys
from typing import TextIO

from .menu import _parse_unsigned


def _write(stream: TextIO, text: str) -> None:
    stream.write(text)
    stream.flush()


def ask(
    question: str,
    default: bool,
    no_confirm: bool = False,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> bool:
    """Ask a yes/no question; an empty answer gives ``default``."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    yn = "[Y/n]:" if default else "[y/N]:"
    _write(stdout, f":: {question} {yn} ")
    if no_confirm:
        _write(stdout, "\n")
        return default

    answer = stdin.readline().lower().strip()
    if answer in ("y", "yes"):
        return True
    if not answer:
        return default
    return False


def prompt_input(
    question: str,
    no_confirm: bool = False,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> str:
    """Ask for a line of free text and return it as typed."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    _write(stdout, f":: {question}\n:: ")
    if no_confirm:
        _write(stdout, "\n")
        return ""
    return stdin.readline()


def get_provider(
    max_value: int,
    no_confirm: bool = False,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Ask for a number between 1 and ``max_value``; return it zero-based."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    while True:
        _write(stdout, "\nEnter a number (default=1): ")
        line = "" if no_confirm else stdin.readline()

        text = line.strip()
        if not text:
            return 0

        num = _parse_unsigned(text)
        if num is None:
            _write(stderr, f"invalid number: {text}\n")
            continue

        if not 1 <= num <= max_value:
            _write(stderr, f"invalid value: {num} is not between 1 and {max_value}\n")
            continue

        return num - 1