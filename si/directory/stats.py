"""Entry counts shown at the top of a directory view."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..fs import DirectoryChild


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


@dataclass(frozen=True)
class DirectoryStats:
    entries: int = 0
    directories: int = 0
    files: int = 0

    @classmethod
    def from_children(cls, children: Iterable[DirectoryChild]) -> DirectoryStats:
        """Count all children; symlinks and special files count only as entries."""
        entries = directories = files = 0
        for child in children:
            entries += 1
            if child.is_dir:
                directories += 1
            elif child.is_file:
                files += 1
        return cls(entries=entries, directories=directories, files=files)

    def format(self) -> str:
        return ", ".join(
            (
                _plural(self.entries, "entry", "entries"),
                _plural(self.directories, "directory", "directories"),
                _plural(self.files, "file", "files"),
            )
        )
