"""Filesystem path helpers: a movable path, a directory and a file."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import EngineError


class PathNotFoundError(EngineError):
    """No parent directory holds the requested child."""


class EnginePath:
    """A filesystem path that can be moved up and down the tree."""

    def __init__(self, path: str | os.PathLike | EnginePath | None = None) -> None:
        if path is None:
            self._path = Path.cwd()
        elif isinstance(path, EnginePath):
            self._path = path.path
        else:
            self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def __fspath__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"

    @staticmethod
    def file_name_of(path: str | os.PathLike) -> str:
        """Last component of path; empty when path ends with a separator."""
        return os.path.basename(os.fspath(path))

    @staticmethod
    def folder_path_of(path: str | os.PathLike) -> str:
        """Path with its file name cut off, keeping the trailing separator."""
        text = os.fspath(path)
        name = EnginePath.file_name_of(text)
        return text[: len(text) - len(name)]

    def file_name(self) -> str:
        return self._path.name

    def full_path(self) -> str:
        return str(self._path)

    def extension(self) -> str:
        return os.path.splitext(self._path.name)[1]

    def try_move_parent(self) -> bool:
        """Move to the parent directory; False if already at the root."""
        if self.is_root():
            return False
        self._path = self._path.parent
        return True

    def move_parent_to_child_path(self, name: str) -> None:
        """Climb until the current directory contains name."""
        while not self.is_root():
            if self.exists_with(name):
                return
            self.try_move_parent()
        raise PathNotFoundError(f"no parent directory contains {name!r}")

    def exists(self) -> bool:
        return self._path.exists()

    def exists_with(self, name: str) -> bool:
        return (self._path / name).exists()

    def is_directory(self) -> bool:
        return self._path.is_dir()

    def is_root(self) -> bool:
        return self._path.parent == self._path

    def try_move(self, path: str | os.PathLike) -> bool:
        """Descend into path; True when the resulting path does not exist yet."""
        self._path = self._path / path
        return not self.exists()

    def set_path(self, path: str | os.PathLike) -> None:
        self._path = Path(path)


class EngineDirectory(EnginePath):
    """A path that names a directory."""

    def move_parent_to_directory(self, name: str) -> None:
        """Climb until the current directory contains the child name."""
        self.move_parent_to_child_path(name)

    def plus_file_name(self, file_name: str) -> EnginePath:
        return EnginePath(self._path / file_name)


class EngineFile(EnginePath):
    """A path that names a file."""

    def directory(self) -> EngineDirectory:
        result = EngineDirectory(self._path)
        result.try_move_parent()
        return result