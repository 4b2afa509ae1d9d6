"""Line-number gutter for character streams.

The gutter width is fixed per file from its total newline count, so every
line number is padded to the same width regardless of its own digit count.
"""

from __future__ import annotations

from pathlib import Path

from ..stream import Stream


def count_newlines(path: Path) -> int:
    with Stream.read_utf8_file(path) as chars:
        return chars.count(lambda char: char == "\n")


def field_width(newline_count: int) -> int:
    """Number of decimal digits in ``newline_count`` (``0`` has one)."""
    return len(str(max(0, newline_count)))


def pad_line_number(number: int, width: int) -> str:
    return str(number).rjust(width)


def add_line_numbers(chars: Stream[str], width: int) -> Stream[str]:
    """Prefix every physical line of ``chars`` with ``"<N> | "``.

    Empty lines get a bare ``"<N> |"`` with no trailing space. Characters are
    re-chunked: a line's first character is emitted together with its prefix.
    """
    line_number = 0
    at_line_start = True

    def produce() -> str | None:
        nonlocal line_number, at_line_start
        char = chars.next()
        if char is None:
            return None
        if at_line_start:
            line_number += 1
            prefix = pad_line_number(line_number, width)
            if char == "\n":
                return f"{prefix} |\n"
            at_line_start = False
            return f"{prefix} | {char}"
        if char == "\n":
            at_line_start = True
        return char

    return Stream(iter(produce, None), owned=(chars,))

