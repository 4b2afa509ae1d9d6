"""Error taxonomy surfaced by the inspector.

Every failure the CLI reports carries a human-readable message.
Filesystem ``OSError`` values are not wrapped and propagate unchanged.
"""

from __future__ import annotations

from pathlib import Path


class InspectError(Exception):
    """Base class for failures that abort the current invocation."""


class PathNotFoundError(InspectError):
    def __init__(self, path: Path | str) -> None:
        super().__init__(f"path not found: {path}")
        self.path = path


class UnsupportedEntryTypeError(InspectError):
    """Raised for paths that are neither file, directory nor symlink."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"unknown filetype for: {path}")
        self.path = path


class DecodeError(InspectError):
    """Raised when file contents are not valid UTF-8.

    Replacement characters are never substituted, so a partially decoded file
    cannot leave the colorizer in an inconsistent state.
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"utf-8 decoding error in {path}: {reason}")
        self.path = path
        self.reason = reason
