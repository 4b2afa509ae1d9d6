"""Directory view: entry counts, flat listing, and recursive tree."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..ansi import paint
from ..fs import DirectoryChild, list_directory_children
from ..terminal import Context
from .stats import DirectoryStats
from .tree import iter_tree_lines, output_tree, render_prefix


def format_listing_entry(child: DirectoryChild) -> str:
    if child.lists_as_dir:
        return f"{paint(child.display_name, 'blue')}/"
    return child.display_name


def output_listing(context: Context, children: Iterable[DirectoryChild]) -> None:
    for child in children:
        context.write(f"{format_listing_entry(child)}\n")


def output_directory(context: Context, directory: Path) -> None:
    """Write stats, flat listing, and tree sections separated by rules."""
    children = list_directory_children(directory)
    context.write(f"{DirectoryStats.from_children(children).format()}\n")
    context.write_separator()
    output_listing(context, children)
    context.write_separator()
    output_tree(context, children)


__all__ = [
    "DirectoryStats",
    "format_listing_entry",
    "iter_tree_lines",
    "output_directory",
    "output_listing",
    "output_tree",
    "render_prefix",
]
