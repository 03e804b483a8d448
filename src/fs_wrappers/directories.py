"""Directory operations backed by the real file system."""

from __future__ import annotations

import errno
import fnmatch
import os
import shutil
from datetime import datetime
from typing import Iterator

from fs_wrappers import _times
from fs_wrappers.files import RealFile
from fs_wrappers.protocols import FileOperations
from fs_wrappers.tree import TreeOperations
from fs_wrappers.types import StrPath


def _raise(error: OSError) -> None:
    raise error


class RealDirectory:
    """Production directory implementation.

    Wraps os, os.path and shutil directory operations.
    Satisfies the DirectoryOperations protocol structurally.
    """

    def __init__(self, file: FileOperations | None = None) -> None:
        """Initialize the directory wrapper.

        Args:
            file: File operations used when copying trees. Defaults to RealFile.
        """
        self._tree = TreeOperations(directory=self, file=file or RealFile())

    def exists(self, path: StrPath) -> bool:
        """Check if a directory exists."""
        return os.path.isdir(path)

    def create(self, path: StrPath) -> str:
        """Create a directory and any missing parents."""
        os.makedirs(path, exist_ok=True)
        return os.path.abspath(path)

    def delete(self, path: StrPath, recursive: bool = False) -> None:
        """Delete a directory, optionally with its content."""
        if recursive:
            shutil.rmtree(path)
        else:
            os.rmdir(path)

    def enumerate_files(
        self, path: StrPath, pattern: str = "*", recursive: bool = False
    ) -> Iterator[str]:
        """Lazily yield the files in a directory."""
        return self._walk(path, pattern, recursive, files=True, dirs=False)

    def enumerate_directories(
        self, path: StrPath, pattern: str = "*", recursive: bool = False
    ) -> Iterator[str]:
        """Lazily yield the subdirectories of a directory."""
        return self._walk(path, pattern, recursive, files=False, dirs=True)

    def enumerate_entries(
        self, path: StrPath, pattern: str = "*", recursive: bool = False
    ) -> Iterator[str]:
        """Lazily yield files and subdirectories of a directory."""
        return self._walk(path, pattern, recursive, files=True, dirs=True)

    def get_files(
        self, path: StrPath, pattern: str = "*", recursive: bool = False
    ) -> list[str]:
        return list(self.enumerate_files(path, pattern, recursive))

    def get_directories(
        self, path: StrPath, pattern: str = "*", recursive: bool = False
    ) -> list[str]:
        return list(self.enumerate_directories(path, pattern, recursive))

    def get_entries(
        self, path: StrPath, pattern: str = "*", recursive: bool = False
    ) -> list[str]:
        return list(self.enumerate_entries(path, pattern, recursive))

    def get_root(self, path: StrPath) -> str:
        """Get the drive or mount point a path resides on.

        The path does not need to exist; its nearest existing ancestor decides.
        Symbolic links are resolved, so a link onto another mount reports
        the mount it points to.

        Args:
            path: Path to resolve.

        Returns:
            Drive root on Windows, mount point elsewhere.
        """
        full = os.path.realpath(path)
        drive, _ = os.path.splitdrive(full)
        if drive:
            return drive + os.sep
        current = full
        while not os.path.ismount(current):
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent
        return current

    def get_parent(self, path: StrPath) -> str | None:
        """Get the parent directory, or None for a root."""
        full = os.path.abspath(path)
        parent = os.path.dirname(full)
        if parent == full:
            return None
        return parent

    def get_current_directory(self) -> str:
        return os.getcwd()

    def set_current_directory(self, path: StrPath) -> None:
        os.chdir(path)

    def get_logical_drives(self) -> list[str]:
        """List the drive roots of the machine."""
        if hasattr(os, "listdrives"):
            return os.listdrives()
        return [os.sep]

    def get_creation_time(self, path: StrPath) -> datetime:
        return _times.creation_time(path)

    def get_creation_time_utc(self, path: StrPath) -> datetime:
        return _times.creation_time(path, utc=True)

    def get_last_access_time(self, path: StrPath) -> datetime:
        return _times.last_access_time(path)

    def get_last_access_time_utc(self, path: StrPath) -> datetime:
        return _times.last_access_time(path, utc=True)

    def get_last_write_time(self, path: StrPath) -> datetime:
        return _times.last_write_time(path)

    def get_last_write_time_utc(self, path: StrPath) -> datetime:
        return _times.last_write_time(path, utc=True)

    def set_last_access_time(self, path: StrPath, when: datetime) -> None:
        _times.set_last_access_time(path, when)

    def set_last_access_time_utc(self, path: StrPath, when: datetime) -> None:
        _times.set_last_access_time(path, when, utc=True)

    def set_last_write_time(self, path: StrPath, when: datetime) -> None:
        _times.set_last_write_time(path, when)

    def set_last_write_time_utc(self, path: StrPath, when: datetime) -> None:
        _times.set_last_write_time(path, when, utc=True)

    def move(self, src: StrPath, dst: StrPath) -> None:
        """Rename a directory on the same volume.

        Raises:
            FileNotFoundError: If src is not a directory.
            FileExistsError: If dst already exists.
        """
        if not os.path.isdir(src):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), os.fspath(src))
        if os.path.lexists(dst):
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), os.fspath(dst))
        os.rename(src, dst)

    def copy(self, src: StrPath, dst: StrPath, overwrite: bool = False) -> None:
        """Copy a directory and its content."""
        self._tree.copy_tree(src, dst, overwrite)

    def move_tree(self, src: StrPath, dst: StrPath, overwrite: bool = False) -> None:
        """Move a directory and its content, across volumes if needed."""
        self._tree.move_tree(src, dst, overwrite)

    def _walk(
        self, path: StrPath, pattern: str, recursive: bool, files: bool, dirs: bool
    ) -> Iterator[str]:
        for current, dirnames, filenames in os.walk(path, onerror=_raise):
            if dirs:
                for name in dirnames:
                    if fnmatch.fnmatch(name, pattern):
                        yield os.path.join(current, name)
            if files:
                for name in filenames:
                    if fnmatch.fnmatch(name, pattern):
                        yield os.path.join(current, name)
            if not recursive:
                break
