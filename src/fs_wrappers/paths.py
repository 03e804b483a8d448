"""Path string operations.

RealPath works on the host platform's path flavour (os.path). Apart from
get_temp_file_name, nothing here touches the disk.
"""

from __future__ import annotations

import os
import tempfile
import uuid

from fs_wrappers.types import StrPath

# Characters that cannot appear in a file name, per platform
_INVALID_FILE_NAME_CHARS = {
    "nt": ['"', "<", ">", "|", "\0", ":", "*", "?", "\\", "/"]
    + [chr(i) for i in range(1, 32)],
    "posix": ["\0", "/"],
}
_INVALID_PATH_CHARS = {
    "nt": ['"', "<", ">", "|", "\0"] + [chr(i) for i in range(1, 32)],
    "posix": ["\0"],
}


class RealPath:
    """Production path implementation.

    Wraps os.path and tempfile operations.
    Satisfies the PathOperations protocol structurally.
    """

    directory_separator = os.sep
    alt_directory_separator = os.altsep
    path_separator = os.pathsep

    def combine(self, *paths: StrPath) -> str:
        """Join path segments; a rooted segment discards everything before it."""
        return os.path.join(*paths)

    def join(self, *paths: StrPath) -> str:
        """Concatenate path segments, adding a separator only where missing."""
        result = ""
        for part in map(os.fspath, paths):
            if not part:
                continue
            needs_sep = not (self.ends_in_directory_separator(result) or _starts_with_sep(part))
            if result and needs_sep:
                result += os.sep
            result += part
        return result

    def change_extension(self, path: StrPath, extension: str | None) -> str:
        """Replace or remove the extension of a path.

        Args:
            path: Path to change.
            extension: New extension with or without the leading dot.
                None removes the extension, including the dot.

        Returns:
            The modified path.
        """
        root, _ = os.path.splitext(os.fspath(path))
        if extension is None:
            return root
        if extension and not extension.startswith("."):
            extension = "." + extension
        return root + (extension or ".")

    def get_directory_name(self, path: StrPath) -> str:
        return os.path.dirname(path)

    def get_file_name(self, path: StrPath) -> str:
        return os.path.basename(path)

    def get_file_name_without_extension(self, path: StrPath) -> str:
        return os.path.splitext(os.path.basename(path))[0]

    def get_extension(self, path: StrPath) -> str:
        return os.path.splitext(path)[1]

    def has_extension(self, path: StrPath) -> bool:
        return bool(self.get_extension(path))

    def get_path_root(self, path: StrPath) -> str:
        """Get the drive and leading separator of a path, or "" if relative."""
        drive, rest = os.path.splitdrive(os.fspath(path))
        if _starts_with_sep(rest):
            return drive + rest[0]
        return drive

    def get_full_path(self, path: StrPath) -> str:
        return os.path.abspath(path)

    def get_relative_path(self, relative_to: StrPath, path: StrPath) -> str:
        """Get path relative to relative_to."""
        return os.path.relpath(path, relative_to)

    def get_temp_path(self) -> str:
        return tempfile.gettempdir()

    def get_temp_file_name(self) -> str:
        """Create an empty, uniquely named temp file and return its path."""
        fd, name = tempfile.mkstemp(suffix=".tmp")
        os.close(fd)
        return name

    def get_random_file_name(self) -> str:
        """Return a random 8.3 style name. Nothing is created."""
        token = uuid.uuid4().hex
        return f"{token[:8]}.{token[8:11]}"

    def is_path_rooted(self, path: StrPath) -> bool:
        """Check if a path has a drive or starts with a separator."""
        return bool(self.get_path_root(path))

    def is_path_fully_qualified(self, path: StrPath) -> bool:
        return os.path.isabs(path)

    def ends_in_directory_separator(self, path: StrPath) -> bool:
        text = os.fspath(path)
        return bool(text) and _is_sep(text[-1])

    def trim_ending_directory_separator(self, path: StrPath) -> str:
        """Strip one trailing separator unless the path is a root."""
        text = os.fspath(path)
        if self.ends_in_directory_separator(text) and text != self.get_path_root(text):
            return text[:-1]
        return text

    def get_invalid_file_name_chars(self) -> list[str]:
        return list(_INVALID_FILE_NAME_CHARS.get(os.name, _INVALID_FILE_NAME_CHARS["posix"]))

    def get_invalid_path_chars(self) -> list[str]:
        return list(_INVALID_PATH_CHARS.get(os.name, _INVALID_PATH_CHARS["posix"]))


def _is_sep(char: str) -> bool:
    return char == os.sep or (os.altsep is not None and char == os.altsep)


def _starts_with_sep(text: str) -> bool:
    return bool(text) and _is_sep(text[0])
