"""Recursive ASCII tree rendering for directory views.

Each entry carries one "has more siblings" flag per ancestor level. The flags
pick the branch glyphs, so a continuation bar is drawn only under ancestors
that still have visible siblings below them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from ..fs import DirectoryChild, list_directory_children
from ..stream import Stream
from ..terminal import Context

BRANCH_GLYPHS: dict[tuple[bool, bool], str] = {
    # (is deepest level, level has more siblings) -> glyph
    (True, True): "├── ",
    (True, False): "└── ",
    (False, True): "│   ",
    (False, False): "    ",
}

ListChildren = Callable[[Path], Iterable[DirectoryChild]]


def render_prefix(prefix: tuple[bool, ...]) -> str:
    """Map per-level sibling flags to branch glyphs.

    The first flag belongs to the top-level entry itself and draws nothing.
    """
    levels = Stream.from_iterable(prefix[1:])
    glyphs: list[str] = []
    for has_next in levels:
        glyphs.append(BRANCH_GLYPHS[(not levels.has_next(), has_next)])
    return "".join(glyphs)


def iter_tree_lines(
    children: Iterable[DirectoryChild],
    list_children: ListChildren = list_directory_children,
    parent_prefix: tuple[bool, ...] = (),
) -> Iterator[str]:
    """Yield ``<prefix><name>\\n`` for every visible entry, depth first.

    ``children`` must already be sorted. Hidden entries are dropped before
    lookahead, so the last visible sibling always gets the closing glyph.
    Each recursion level receives its own extended copy of the prefix.
    """
    siblings = Stream.from_iterable(children).filter(lambda child: not child.is_hidden)
    for child in siblings:
        child_prefix = (*parent_prefix, siblings.has_next())
        yield f"{render_prefix(child_prefix)}{child.display_name}\n"
        if child.is_dir:
            yield from iter_tree_lines(list_children(child.path), list_children, child_prefix)


def output_tree(
    context: Context,
    children: Iterable[DirectoryChild],
    list_children: ListChildren = list_directory_children,
) -> None:
    for line in iter_tree_lines(children, list_children):
        context.write(line)
