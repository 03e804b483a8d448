"""In-memory file system for unit testing.

MemoryFileSystem keeps files and directories in dictionaries and never
touches the disk. Paths are POSIX style. Several volumes can be declared so
that cross-volume behaviour (a rename that is impossible and must fall back
to copy-then-delete) can be exercised without real mount points.
"""

from __future__ import annotations

import errno
import fnmatch
import os
import posixpath
from typing import Iterable, Iterator

from fs_wrappers.paths import RealPath
from fs_wrappers.tree import TreeOperations
from fs_wrappers.types import StrPath

DEFAULT_ENCODING = "utf-8"


def _error(cls: type[OSError], code: int, path: str) -> OSError:
    return cls(code, os.strerror(code), path)


class MemoryStore:
    """Shared state behind MemoryFile and MemoryDirectory."""

    def __init__(self, volumes: Iterable[str] = ("/",)) -> None:
        self.files: dict[str, bytes] = {}
        self.dirs: set[str] = {"/"}
        self.cwd = "/"
        self.volumes = sorted({"/", *(self.normalize(v) for v in volumes)}, key=len, reverse=True)
        for volume in self.volumes:
            self.make_dirs(volume)

    def normalize(self, path: StrPath) -> str:
        text = os.fspath(path)
        if not text:
            raise _error(FileNotFoundError, errno.ENOENT, text)
        return posixpath.normpath(posixpath.join(self.cwd, text))

    def root_of(self, path: str) -> str:
        for volume in self.volumes:
            if path == volume or path.startswith(volume.rstrip("/") + "/"):
                return volume
        return "/"

    def make_dirs(self, path: str) -> None:
        parts = path.strip("/").split("/") if path != "/" else []
        current = "/"
        for part in parts:
            current = posixpath.join(current, part)
            if current in self.files:
                raise _error(FileExistsError, errno.EEXIST, current)
            self.dirs.add(current)

    def children(self, path: str) -> Iterator[str]:
        prefix = path.rstrip("/") + "/"
        for entry in sorted(self.dirs | set(self.files)):
            if entry != path and entry.startswith(prefix) and "/" not in entry[len(prefix):]:
                yield entry

    def descendants(self, path: str) -> list[str]:
        prefix = path.rstrip("/") + "/"
        return [entry for entry in self.dirs | set(self.files) if entry.startswith(prefix)]

    def require_parent(self, path: str) -> None:
        parent = posixpath.dirname(path)
        if parent not in self.dirs:
            raise _error(FileNotFoundError, errno.ENOENT, path)


class MemoryFile:
    """In-memory file operations.

    Implements the data-plane part of the FileOperations protocol.
    """

    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    def exists(self, path: StrPath) -> bool:
        return self._store.normalize(path) in self._store.files

    def read_bytes(self, path: StrPath) -> bytes:
        full = self._store.normalize(path)
        if full in self._store.dirs:
            raise _error(IsADirectoryError, errno.EISDIR, full)
        if full not in self._store.files:
            raise _error(FileNotFoundError, errno.ENOENT, full)
        return self._store.files[full]

    def read_text(self, path: StrPath, encoding: str | None = None) -> str:
        return self.read_bytes(path).decode(encoding or DEFAULT_ENCODING)

    def read_lines(self, path: StrPath, encoding: str | None = None) -> list[str]:
        return list(self.iter_lines(path, encoding))

    def iter_lines(self, path: StrPath, encoding: str | None = None) -> Iterator[str]:
        for line in self.read_text(path, encoding).splitlines(keepends=True):
            yield line.rstrip("\r\n")

    def write_bytes(self, path: StrPath, data: bytes) -> None:
        full = self._store.normalize(path)
        if full in self._store.dirs:
            raise _error(IsADirectoryError, errno.EISDIR, full)
        self._store.require_parent(full)
        self._store.files[full] = bytes(data)

    def write_text(self, path: StrPath, content: str, encoding: str | None = None) -> None:
        self.write_bytes(path, content.encode(encoding or DEFAULT_ENCODING))

    def write_lines(
        self, path: StrPath, lines: Iterable[str], encoding: str | None = None
    ) -> None:
        self.write_text(path, "".join(f"{line}\n" for line in lines), encoding)

    def append_text(self, path: StrPath, content: str, encoding: str | None = None) -> None:
        existing = self.read_bytes(path) if self.exists(path) else b""
        self.write_bytes(path, existing + content.encode(encoding or DEFAULT_ENCODING))

    def append_lines(
        self, path: StrPath, lines: Iterable[str], encoding: str | None = None
    ) -> None:
        self.append_text(path, "".join(f"{line}\n" for line in lines), encoding)

    def copy(self, src: StrPath, dst: StrPath, overwrite: bool = False) -> None:
        data = self.read_bytes(src)
        target = self._store.normalize(dst)
        if not overwrite and target in self._store.files:
            raise _error(FileExistsError, errno.EEXIST, target)
        self.write_bytes(target, data)

    def move(self, src: StrPath, dst: StrPath, overwrite: bool = False) -> None:
        self.copy(src, dst, overwrite)
        self.delete(src)

    def delete(self, path: StrPath) -> None:
        full = self._store.normalize(path)
        if full in self._store.dirs:
            raise _error(IsADirectoryError, errno.EISDIR, full)
        if full not in self._store.files:
            raise _error(FileNotFoundError, errno.ENOENT, full)
        del self._store.files[full]


class MemoryDirectory:
    """In-memory directory operations.

    Implements the data-plane part of the DirectoryOperations protocol.
    A rename across declared volumes fails with EXDEV like the real one.
    """

    def __init__(self, store: MemoryStore, file: MemoryFile) -> None:
        self._store = store
        self._tree = TreeOperations(directory=self, file=file)

    def exists(self, path: StrPath) -> bool:
        return self._store.normalize(path) in self._store.dirs

    def create(self, path: StrPath) -> str:
        full = self._store.normalize(path)
        self._store.make_dirs(full)
        return full

    def delete(self, path: StrPath, recursive: bool = False) -> None:
        full = self._store.normalize(path)
        if full not in self._store.dirs:
            raise _error(FileNotFoundError, errno.ENOENT, full)
        below = self._store.descendants(full)
        if below and not recursive:
            raise _error(OSError, errno.ENOTEMPTY, full)
        for entry in below:
            self._store.files.pop(entry, None)
            self._store.dirs.discard(entry)
        self._store.dirs.discard(full)

    def enumerate_files(
        self, path: StrPath, pattern: str = "*", recursive: bool = False
    ) -> Iterator[str]:
        return self._walk(path, pattern, recursive, files=True, dirs=False)

    def enumerate_directories(
        self, path: StrPath, pattern: str = "*", recursive: bool = False
    ) -> Iterator[str]:
        return self._walk(path, pattern, recursive, files=False, dirs=True)

    def enumerate_entries(
        self, path: StrPath, pattern: str = "*", recursive: bool = False
    ) -> Iterator[str]:
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
        return self._store.root_of(self._store.normalize(path))

    def get_parent(self, path: StrPath) -> str | None:
        full = self._store.normalize(path)
        if full == "/":
            return None
        return posixpath.dirname(full)

    def get_current_directory(self) -> str:
        return self._store.cwd

    def set_current_directory(self, path: StrPath) -> None:
        full = self._store.normalize(path)
        if full not in self._store.dirs:
            raise _error(FileNotFoundError, errno.ENOENT, full)
        self._store.cwd = full

    def get_logical_drives(self) -> list[str]:
        return sorted(self._store.volumes)

    def move(self, src: StrPath, dst: StrPath) -> None:
        source = self._store.normalize(src)
        target = self._store.normalize(dst)
        if source not in self._store.dirs:
            raise _error(FileNotFoundError, errno.ENOENT, source)
        if target in self._store.dirs or target in self._store.files:
            raise _error(FileExistsError, errno.EEXIST, target)
        if self._store.root_of(source) != self._store.root_of(target):
            raise _error(OSError, errno.EXDEV, target)
        if target.startswith(source.rstrip("/") + "/"):
            raise _error(OSError, errno.EINVAL, target)
        self._store.require_parent(target)

        for entry in [source, *self._store.descendants(source)]:
            moved = target + entry[len(source):]
            if entry in self._store.files:
                self._store.files[moved] = self._store.files.pop(entry)
            else:
                self._store.dirs.discard(entry)
                self._store.dirs.add(moved)

    def copy(self, src: StrPath, dst: StrPath, overwrite: bool = False) -> None:
        self._tree.copy_tree(src, dst, overwrite)

    def move_tree(self, src: StrPath, dst: StrPath, overwrite: bool = False) -> None:
        self._tree.move_tree(src, dst, overwrite)

    def _walk(
        self, path: StrPath, pattern: str, recursive: bool, files: bool, dirs: bool
    ) -> Iterator[str]:
        full = self._store.normalize(path)
        if full not in self._store.dirs:
            raise _error(FileNotFoundError, errno.ENOENT, full)
        pending = [full]
        while pending:
            current = pending.pop(0)
            for entry in self._store.children(current):
                is_dir = entry in self._store.dirs
                if is_dir and recursive:
                    pending.append(entry)
                wanted = dirs if is_dir else files
                if wanted and fnmatch.fnmatchcase(posixpath.basename(entry), pattern):
                    yield entry


class MemoryFileSystem:
    """In-memory filesystem implementation.

    Satisfies the FileSystem protocol structurally for the data-plane
    operations; attribute and timestamp calls are not available.
    """

    def __init__(self, volumes: Iterable[str] = ("/",)) -> None:
        """Initialize an empty filesystem.

        Args:
            volumes: Mount points. Each path belongs to the longest volume
                that prefixes it; "/" is always present.
        """
        self.store = MemoryStore(volumes)
        self.file = MemoryFile(self.store)
        self.directory = MemoryDirectory(self.store, self.file)
        self.path = RealPath()
