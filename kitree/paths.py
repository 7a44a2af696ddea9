"""Filesystem paths that sort directories before files."""

from __future__ import annotations

import functools
import os
import stat
from pathlib import Path


@functools.total_ordering
class SortablePath:
    """A path ordered with directories first, then by path."""

    __slots__ = ("path",)

    def __init__(self, path: str | os.PathLike = "") -> None:
        self.path = Path(path)

    def is_dir(self) -> bool:
        """Return whether the path names an existing directory."""
        try:
            return stat.S_ISDIR(os.stat(self.path).st_mode)
        except (OSError, ValueError):
            return False

    def join(self, *args: str | os.PathLike) -> SortablePath:
        """Return a new path with ``args`` appended."""
        return SortablePath(self.path.joinpath(*args))

    @property
    def parent(self) -> SortablePath:
        return SortablePath(self.path.parent)

    @property
    def name(self) -> str:
        return self.path.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SortablePath):
            return NotImplemented
        self_dir, other_dir = self.is_dir(), other.is_dir()
        if self_dir != other_dir:
            return self_dir
        return self.path < other.path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortablePath):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __fspath__(self) -> str:
        return os.fspath(self.path)

    def __str__(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        return f"SortablePath({str(self.path)!r})"