"""Output context, separators, and pager plumbing.

Terminal width and color choice are carried explicitly in ``Context``
instead of being read from process-wide state by the output functions.
"""

from __future__ import annotations

import contextlib
import os
import shlex
import shutil
import subprocess
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from .ansi import paint, strip_ansi
from .stream import Stream

DEFAULT_SEPARATOR_WIDTH = 20
SEPARATOR_CHAR = "─"


def separator_line(width: int) -> str:
    return Stream.replicate(SEPARATOR_CHAR, width).join()


def separator(width: int) -> str:
    """Full-width bold yellow rule followed by a newline."""
    return paint(separator_line(width), "yellow") + "\n"


@dataclass
class Context:
    """Where and how inspector output is written."""

    stdout: TextIO
    terminal_width: int | None = None
    color: bool = True
    default_width: int = DEFAULT_SEPARATOR_WIDTH

    def write(self, text: str) -> None:
        """Write ``text``, dropping escape sequences when color is off."""
        self.stdout.write(text if self.color else strip_ansi(text))

    def separator_width(self) -> int:
        return self.terminal_width or self.default_width

    def write_separator(self) -> None:
        self.write(separator(self.separator_width()))


def _is_tty(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def detect_terminal_width(stream: TextIO) -> int | None:
    """Return the column count when ``stream`` is a terminal, else ``None``."""
    if not _is_tty(stream):
        return None
    try:
        return os.get_terminal_size(stream.fileno()).columns or None
    except (OSError, ValueError):
        return None


@contextlib.contextmanager
def open_pager(command: str | None, stdout: TextIO | None = None) -> Iterator[TextIO]:
    """Yield a stream that feeds ``command`` when paging makes sense.

    Output goes straight to ``stdout`` when no pager is configured, stdout is
    not a terminal, or the pager program is not installed.
    """
    target = stdout if stdout is not None else sys.stdout
    argv = shlex.split(command) if command else []
    if not argv or not _is_tty(target) or shutil.which(argv[0]) is None:
        yield target
        return

    target.flush()
    process = subprocess.Popen(argv, stdin=subprocess.PIPE, text=True, encoding="utf-8")
    assert process.stdin is not None
    try:
        yield process.stdin
    except BrokenPipeError:
        # Pager quit before reading everything.
        pass
    finally:
        with contextlib.suppress(BrokenPipeError):
            process.stdin.close()
        process.wait()
