"""Single-file operations backed by the real file system.

RealFile forwards every call to the standard library (open, os, shutil)
and lets its exceptions propagate unchanged.
"""

from __future__ import annotations

import errno
import os
import shutil
from datetime import datetime
from typing import IO, Iterable, Iterator

from fs_wrappers import _times
from fs_wrappers.types import StrPath


class RealFile:
    """Production file implementation.

    Wraps standard library file operations.
    Satisfies the FileOperations protocol structurally.
    """

    def exists(self, path: StrPath) -> bool:
        """Check if a regular file exists."""
        return os.path.isfile(path)

    def open(self, path: StrPath, mode: str = "r", encoding: str | None = None) -> IO:
        """Open a file and return a file object."""
        return open(path, mode, encoding=encoding)

    def open_read(self, path: StrPath) -> IO[bytes]:
        """Open an existing file for binary reading."""
        return open(path, "rb")

    def open_write(self, path: StrPath) -> IO[bytes]:
        """Open or create a file for binary writing without truncating it."""
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | getattr(os, "O_BINARY", 0), 0o666)
        return os.fdopen(fd, "wb")

    def open_text(self, path: StrPath, encoding: str | None = None) -> IO[str]:
        """Open an existing text file for reading."""
        return open(path, "r", encoding=encoding)

    def open_append(self, path: StrPath, encoding: str | None = None) -> IO[str]:
        """Open a text file for appending."""
        return open(path, "a", encoding=encoding)

    def create(self, path: StrPath) -> IO[bytes]:
        """Create or truncate a file for binary writing."""
        return open(path, "wb")

    def create_text(self, path: StrPath, encoding: str | None = None) -> IO[str]:
        """Create or truncate a file for text writing."""
        return open(path, "w", encoding=encoding)

    def read_bytes(self, path: StrPath) -> bytes:
        """Read the whole file as bytes."""
        with open(path, "rb") as f:
            return f.read()

    def read_text(self, path: StrPath, encoding: str | None = None) -> str:
        """Read the whole file as text."""
        with open(path, "r", encoding=encoding) as f:
            return f.read()

    def read_lines(self, path: StrPath, encoding: str | None = None) -> list[str]:
        """Read all lines of a text file."""
        return list(self.iter_lines(path, encoding))

    def iter_lines(self, path: StrPath, encoding: str | None = None) -> Iterator[str]:
        """Lazily yield the lines of a text file."""
        with open(path, "r", encoding=encoding) as f:
            for line in f:
                yield line.rstrip("\n")

    def write_bytes(self, path: StrPath, data: bytes) -> None:
        """Write bytes to a file."""
        with open(path, "wb") as f:
            f.write(data)

    def write_text(self, path: StrPath, content: str, encoding: str | None = None) -> None:
        """Write text to a file."""
        with open(path, "w", encoding=encoding) as f:
            f.write(content)

    def write_lines(
        self, path: StrPath, lines: Iterable[str], encoding: str | None = None
    ) -> None:
        """Write one line per item to a file."""
        with open(path, "w", encoding=encoding) as f:
            f.writelines(f"{line}\n" for line in lines)

    def append_text(self, path: StrPath, content: str, encoding: str | None = None) -> None:
        """Append text to a file."""
        with open(path, "a", encoding=encoding) as f:
            f.write(content)

    def append_lines(
        self, path: StrPath, lines: Iterable[str], encoding: str | None = None
    ) -> None:
        """Append one line per item to a file."""
        with open(path, "a", encoding=encoding) as f:
            f.writelines(f"{line}\n" for line in lines)

    def copy(self, src: StrPath, dst: StrPath, overwrite: bool = False) -> None:
        """Copy a file with its metadata.

        Args:
            src: Source file.
            dst: Destination file.
            overwrite: Replace an existing destination file.

        Raises:
            FileNotFoundError: If src does not exist.
            FileExistsError: If dst exists and overwrite is False.
        """
        if not overwrite and os.path.lexists(dst):
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), os.fspath(dst))
        shutil.copyfile(src, dst)
        shutil.copystat(src, dst)

    def move(self, src: StrPath, dst: StrPath, overwrite: bool = False) -> None:
        """Move a file, copying it when dst is on another volume.

        Args:
            src: Source file.
            dst: Destination file.
            overwrite: Replace an existing destination file.

        Raises:
            FileNotFoundError: If src does not exist.
            FileExistsError: If dst exists and overwrite is False.
            IsADirectoryError: If dst is a directory.
        """
        if not os.path.isfile(src):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), os.fspath(src))
        if os.path.isdir(dst):
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), os.fspath(dst))
        if not overwrite and os.path.lexists(dst):
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), os.fspath(dst))
        shutil.move(src, dst)

    def delete(self, path: StrPath) -> None:
        """Delete a file."""
        os.remove(path)

    def replace(self, src: StrPath, dst: StrPath, backup: StrPath | None = None) -> None:
        """Replace dst with src, optionally keeping the original dst as backup."""
        if not os.path.isfile(src):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), os.fspath(src))
        if not os.path.isfile(dst):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), os.fspath(dst))
        if backup is not None:
            os.replace(dst, backup)
        os.replace(src, dst)

    def get_attributes(self, path: StrPath) -> int:
        """Return the mode bits of a file."""
        return os.stat(path).st_mode

    def set_attributes(self, path: StrPath, mode: int) -> None:
        """Change the permission bits of a file."""
        os.chmod(path, mode)

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
