"""Protocol definitions for the file-system abstractions.

This module defines abstract interfaces (Protocols) for the three capability
sets exposed by fs-wrappers: files, directories and path strings.
Designing to interfaces enables:
- Loose coupling between components and the disk
- Easy substitution of test doubles
- Clear contracts for implementations

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from datetime import datetime
from typing import IO, Iterable, Iterator, Protocol, runtime_checkable

from fs_wrappers.types import StrPath


@runtime_checkable
class FileOperations(Protocol):
    """Protocol for single-file operations.

    Implementations create, read, write, copy, move and delete single files
    and query or change their attributes and timestamps.
    """

    def exists(self, path: StrPath) -> bool:
        """Check if a regular file exists.

        Args:
            path: Path to check.

        Returns:
            True if path is an existing file, False otherwise.
        """
        ...

    def open(self, path: StrPath, mode: str = "r", encoding: str | None = None) -> IO:
        """Open a file and return a file object."""
        ...

    def open_read(self, path: StrPath) -> IO[bytes]:
        """Open an existing file for binary reading."""
        ...

    def open_write(self, path: StrPath) -> IO[bytes]:
        """Open or create a file for binary writing."""
        ...

    def open_text(self, path: StrPath, encoding: str | None = None) -> IO[str]:
        """Open an existing text file for reading."""
        ...

    def open_append(self, path: StrPath, encoding: str | None = None) -> IO[str]:
        """Open a text file for appending, creating it if missing."""
        ...

    def create(self, path: StrPath) -> IO[bytes]:
        """Create or truncate a file for binary writing."""
        ...

    def create_text(self, path: StrPath, encoding: str | None = None) -> IO[str]:
        """Create or truncate a file for text writing."""
        ...

    def read_bytes(self, path: StrPath) -> bytes:
        """Read the whole file as bytes.

        Args:
            path: Path to the file.

        Returns:
            File content.

        Raises:
            FileNotFoundError: If file does not exist.
        """
        ...

    def read_text(self, path: StrPath, encoding: str | None = None) -> str:
        """Read the whole file as text.

        Args:
            path: Path to the file.
            encoding: Text encoding. Defaults to the platform default.

        Returns:
            File content as string.

        Raises:
            FileNotFoundError: If file does not exist.
        """
        ...

    def read_lines(self, path: StrPath, encoding: str | None = None) -> list[str]:
        """Read all lines of a text file without line terminators."""
        ...

    def iter_lines(self, path: StrPath, encoding: str | None = None) -> Iterator[str]:
        """Lazily yield the lines of a text file without line terminators."""
        ...

    def write_bytes(self, path: StrPath, data: bytes) -> None:
        """Create or overwrite a file with the given bytes."""
        ...

    def write_text(self, path: StrPath, content: str, encoding: str | None = None) -> None:
        """Create or overwrite a file with the given text."""
        ...

    def write_lines(
        self, path: StrPath, lines: Iterable[str], encoding: str | None = None
    ) -> None:
        """Create or overwrite a file with one line per item."""
        ...

    def append_text(self, path: StrPath, content: str, encoding: str | None = None) -> None:
        """Append text to a file, creating it if missing."""
        ...

    def append_lines(
        self, path: StrPath, lines: Iterable[str], encoding: str | None = None
    ) -> None:
        """Append one line per item to a file, creating it if missing."""
        ...

    def copy(self, src: StrPath, dst: StrPath, overwrite: bool = False) -> None:
        """Copy a single file.

        Args:
            src: Source file.
            dst: Destination file (not a directory).
            overwrite: Replace an existing destination file.

        Raises:
            FileNotFoundError: If src does not exist.
            FileExistsError: If dst exists and overwrite is False.
        """
        ...

    def move(self, src: StrPath, dst: StrPath, overwrite: bool = False) -> None:
        """Move a single file.

        Args:
            src: Source file.
            dst: Destination file (not a directory).
            overwrite: Replace an existing destination file.

        Raises:
            FileNotFoundError: If src does not exist.
            FileExistsError: If dst exists and overwrite is False.
        """
        ...

    def delete(self, path: StrPath) -> None:
        """Delete a file.

        Raises:
            FileNotFoundError: If file does not exist.
        """
        ...

    def replace(self, src: StrPath, dst: StrPath, backup: StrPath | None = None) -> None:
        """Replace dst with src, deleting src and optionally backing up dst.

        Args:
            src: File whose content replaces dst.
            dst: File to be replaced.
            backup: Where to keep a copy of the original dst, if given.

        Raises:
            FileNotFoundError: If src or dst does not exist. Nothing is changed.
        """
        ...

    def get_attributes(self, path: StrPath) -> int:
        """Return the mode bits of a file (``st_mode``)."""
        ...

    def set_attributes(self, path: StrPath, mode: int) -> None:
        """Change the permission bits of a file."""
        ...

    def get_creation_time(self, path: StrPath) -> datetime: ...

    def get_creation_time_utc(self, path: StrPath) -> datetime: ...

    def get_last_access_time(self, path: StrPath) -> datetime: ...

    def get_last_access_time_utc(self, path: StrPath) -> datetime: ...

    def get_last_write_time(self, path: StrPath) -> datetime: ...

    def get_last_write_time_utc(self, path: StrPath) -> datetime: ...

    def set_last_access_time(self, path: StrPath, when: datetime) -> None: ...

    def set_last_access_time_utc(self, path: StrPath, when: datetime) -> None: ...

    def set_last_write_time(self, path: StrPath, when: datetime) -> None: ...

    def set_last_write_time_utc(self, path: StrPath, when: datetime) -> None: ...


@runtime_checkable
class DirectoryOperations(Protocol):
    """Protocol for directory operations.

    Implementations create, delete, enumerate, copy and move directories and
    answer root, parent and current-directory queries.
    """

    def exists(self, path: StrPath) -> bool:
        """Check if a directory exists.

        Args:
            path: Path to check.

        Returns:
            True if path is an existing directory, False otherwise.
        """
        ...

    def create(self, path: StrPath) -> str:
        """Create a directory and any missing parents.

        Args:
            path: Directory to create.

        Returns:
            Absolute path of the directory, whether or not it already existed.

        Raises:
            FileExistsError: If path exists and is a file.
        """
        ...

    def delete(self, path: StrPath, recursive: bool = False) -> None:
        """Delete a directory.

        Args:
            path: Directory to delete.
            recursive: Also delete everything below it.

        Raises:
            FileNotFoundError: If the directory does not exist.
            OSError: If the directory is not empty and recursive is False.
        """
        ...

    def enumerate_files(
        self, path: StrPath, pattern: str = "*", recursive: bool = False
    ) -> Iterator[str]:
        """Lazily yield the files in a directory matching a glob pattern.

        Args:
            path: Directory to search.
            pattern: Pattern matched against each file name.
            recursive: Also search all subdirectories.

        Returns:
            Iterator of file paths, each prefixed with path.
        """
        ...

    def enumerate_directories(
        self, path: StrPath, pattern: str = "*", recursive: bool = False
    ) -> Iterator[str]:
        """Lazily yield the subdirectories matching a glob pattern."""
        ...

    def enumerate_entries(
        self, path: StrPath, pattern: str = "*", recursive: bool = False
    ) -> Iterator[str]:
        """Lazily yield files and subdirectories matching a glob pattern."""
        ...

    def get_files(
        self, path: StrPath, pattern: str = "*", recursive: bool = False
    ) -> list[str]: ...

    def get_directories(
        self, path: StrPath, pattern: str = "*", recursive: bool = False
    ) -> list[str]: ...

    def get_entries(
        self, path: StrPath, pattern: str = "*", recursive: bool = False
    ) -> list[str]: ...

    def get_root(self, path: StrPath) -> str:
        """Get the volume root a path resides on.

        Args:
            path: Path to resolve. It does not need to exist.

        Returns:
            Drive or mount point of the path.
        """
        ...

    def get_parent(self, path: StrPath) -> str | None:
        """Get the parent directory of a path, or None for a root."""
        ...

    def get_current_directory(self) -> str: ...

    def set_current_directory(self, path: StrPath) -> None: ...

    def get_logical_drives(self) -> list[str]: ...

    def get_creation_time(self, path: StrPath) -> datetime: ...

    def get_creation_time_utc(self, path: StrPath) -> datetime: ...

    def get_last_access_time(self, path: StrPath) -> datetime: ...

    def get_last_access_time_utc(self, path: StrPath) -> datetime: ...

    def get_last_write_time(self, path: StrPath) -> datetime: ...

    def get_last_write_time_utc(self, path: StrPath) -> datetime: ...

    def set_last_access_time(self, path: StrPath, when: datetime) -> None: ...

    def set_last_access_time_utc(self, path: StrPath, when: datetime) -> None: ...

    def set_last_write_time(self, path: StrPath, when: datetime) -> None: ...

    def set_last_write_time_utc(self, path: StrPath, when: datetime) -> None: ...

    def move(self, src: StrPath, dst: StrPath) -> None:
        """Rename a directory on the same volume.

        Args:
            src: Directory to move.
            dst: New location. Must not exist.

        Raises:
            FileNotFoundError: If src does not exist.
            FileExistsError: If dst already exists.
            OSError: If src and dst are on different volumes.
        """
        ...

    def copy(self, src: StrPath, dst: StrPath, overwrite: bool = False) -> None:
        """Copy a directory and its content.

        Args:
            src: Directory to copy.
            dst: Destination directory.
            overwrite: Copy into an existing dst and replace existing files.

        Raises:
            DirectoryNotFoundError: If src does not exist.
            DirectoryExistsError: If dst exists and overwrite is False.
        """
        ...

    def move_tree(self, src: StrPath, dst: StrPath, overwrite: bool = False) -> None:
        """Move a directory, across volumes if needed.

        Args:
            src: Directory to move.
            dst: Destination directory.
            overwrite: Replace an existing dst.

        Raises:
            DirectoryNotFoundError: If src does not exist.
            DirectoryExistsError: If dst exists and overwrite is False.
        """
        ...


@runtime_checkable
class PathOperations(Protocol):
    """Protocol for path string operations.

    Implementations only manipulate strings; apart from temp-file creation
    nothing touches the disk.
    """

    directory_separator: str
    alt_directory_separator: str | None
    path_separator: str

    def combine(self, *paths: StrPath) -> str:
        """Join path segments; a rooted segment discards everything before it."""
        ...

    def join(self, *paths: StrPath) -> str:
        """Concatenate path segments with a separator, never discarding any."""
        ...

    def change_extension(self, path: StrPath, extension: str | None) -> str:
        """Replace or remove the extension of a path.

        Args:
            path: Path to change.
            extension: New extension with or without the leading dot.
                None removes the extension.

        Returns:
            The modified path.
        """
        ...

    def get_directory_name(self, path: StrPath) -> str: ...

    def get_file_name(self, path: StrPath) -> str: ...

    def get_file_name_without_extension(self, path: StrPath) -> str: ...

    def get_extension(self, path: StrPath) -> str: ...

    def has_extension(self, path: StrPath) -> bool: ...

    def get_path_root(self, path: StrPath) -> str:
        """Get the root portion of a path string, or "" for a relative path."""
        ...

    def get_full_path(self, path: StrPath) -> str: ...

    def get_relative_path(self, relative_to: StrPath, path: StrPath) -> str:
        """Get path relative to relative_to."""
        ...

    def get_temp_path(self) -> str: ...

    def get_temp_file_name(self) -> str:
        """Create an empty, uniquely named temp file and return its path."""
        ...

    def get_random_file_name(self) -> str: ...

    def is_path_rooted(self, path: StrPath) -> bool: ...

    def is_path_fully_qualified(self, path: StrPath) -> bool: ...

    def ends_in_directory_separator(self, path: StrPath) -> bool: ...

    def trim_ending_directory_separator(self, path: StrPath) -> str: ...

    def get_invalid_file_name_chars(self) -> list[str]: ...

    def get_invalid_path_chars(self) -> list[str]: ...


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the aggregate file system.

    Gives access to the file, directory and path capability sets through a
    single injectable object.
    """

    file: FileOperations
    directory: DirectoryOperations
    path: PathOperations
