"""Filesystem access for directory views.

Children are listed with their entry kind and sorted by name. Entry kinds
never follow symlinks, so a directory walk cannot loop; only the listing
marker looks through a link. I/O errors propagate.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

KIND_FILE = "file"
KIND_DIRECTORY = "directory"
KIND_SYMLINK = "symlink"
KIND_OTHER = "other"


@dataclass(frozen=True)
class DirectoryChild:
    """One directory entry: its name, full path and kind."""

    name: str
    path: Path
    kind: str
    target_is_dir: bool = False

    @property
    def is_dir(self) -> bool:
        return self.kind == KIND_DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind == KIND_FILE

    @property
    def lists_as_dir(self) -> bool:
        """Directories and symlinks to directories get the directory marker."""
        return self.is_dir or self.target_is_dir

    @property
    def display_name(self) -> str:
        return display_path(self.name)

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


def display_path(path: Path | str) -> str:
    """Printable form of ``path``; undecodable bytes become U+FFFD."""
    return os.fsencode(path).decode("utf-8", "replace")


def _target_is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_symlink() and entry.is_dir()
    except OSError:
        return False


def entry_kind(entry: os.DirEntry[str]) -> str:
    if entry.is_symlink():
        return KIND_SYMLINK
    if entry.is_dir(follow_symlinks=False):
        return KIND_DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return KIND_FILE
    return KIND_OTHER


def list_directory_children(directory: Path) -> list[DirectoryChild]:
    """Return every child of ``directory``, hidden ones included, sorted by name."""
    with os.scandir(directory) as entries:
        children = [
            DirectoryChild(entry.name, Path(entry.path), entry_kind(entry), _target_is_dir(entry))
            for entry in entries
        ]
    children.sort(key=lambda child: child.name)
    return children


def file_size(path: Path) -> int:
    return path.stat().st_size


def read_link(path: Path) -> Path:
    return Path(os.readlink(path))
