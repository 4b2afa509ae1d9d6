"""File view: size header followed by a colorized, line-numbered dump."""

from __future__ import annotations

from pathlib import Path

from ..fs import display_path, file_size
from ..stream import Stream
from ..terminal import Context
from .colorize import colorize, colorize_text
from .line_numbers import add_line_numbers, count_newlines, field_width


def rendered_chunks(path: Path, color: bool = True) -> Stream[str]:
    """Stream the numbered dump of ``path`` chunk by chunk.

    Colorized chunks are flattened back into characters before numbering so
    line starts are detected on single characters.
    """
    width = field_width(count_newlines(path))
    chars = Stream.read_utf8_file(path)
    if color:
        chars = colorize(chars).flat_map(Stream.from_iterable)
    return add_line_numbers(chars, width)


def output_file(context: Context, path: Path) -> None:
    context.write(f"file: {display_path(path)}, {file_size(path)} bytes\n")
    context.write_separator()
    with rendered_chunks(path, color=context.color) as chunks:
        for chunk in chunks:
            context.write(chunk)


__all__ = [
    "add_line_numbers",
    "colorize",
    "colorize_text",
    "count_newlines",
    "field_width",
    "output_file",
    "rendered_chunks",
]
