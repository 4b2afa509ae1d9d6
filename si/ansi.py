"""ANSI color wrapping and stripping.

Colors are addressed by semantic name so callers never spell escape codes.
Every colored span is bold and ends with a full reset.
"""

from __future__ import annotations

import re

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")

RESET = "\033[0m"
BOLD_COLORS: dict[str, str] = {
    "red": "\033[1;31m",
    "yellow": "\033[1;33m",
    "blue": "\033[1;34m",
    "cyan": "\033[1;36m",
}


def paint(text: str, color: str) -> str:
    """Wrap ``text`` in the bold escape for ``color`` followed by a reset.

    Raises ``KeyError`` for colors outside ``BOLD_COLORS``.
    """
    return f"{BOLD_COLORS[color]}{text}{RESET}"


def strip_ansi(text: str) -> str:
    """Remove escape sequences, leaving only the visible characters."""
    if "\x1b" not in text:
        return text
    return ANSI_ESCAPE_RE.sub("", text)
