"""Low-level redirection of the standard file descriptors."""

from __future__ import annotations

import os
import sys
from typing import IO

STDIN_FILENO = 0
STDOUT_FILENO = 1
STDERR_FILENO = 2
_TTY = "/dev/tty"


def redirect_to_stderr() -> IO[str]:
    """Point standard output at standard error; return a file for the old stdout."""
    sys.stdout.flush()
    saved = os.dup(STDOUT_FILENO)
    try:
        os.dup2(STDERR_FILENO, STDOUT_FILENO)
    except OSError:
        os.close(saved)
        raise
    return os.fdopen(saved, "w")


def reopen_stdin() -> None:
    """Attach standard input to the controlling terminal."""
    fd = os.open(_TTY, os.O_RDONLY)
    try:
        os.dup2(fd, STDIN_FILENO)
    finally:
        os.close(fd)


def reopen_stdout(file: IO) -> None:
    """Point standard output at ``file``."""
    sys.stdout.flush()
    os.dup2(file.fileno(), STDOUT_FILENO)