"""Filesystem abstraction for testability.

This module provides the aggregate filesystem that code takes by injection.
The RealFileSystem implementation wraps standard library operations through
RealFile, RealDirectory and RealPath.
"""

from __future__ import annotations

from fs_wrappers.directories import RealDirectory
from fs_wrappers.files import RealFile
from fs_wrappers.paths import RealPath
from fs_wrappers.protocols import DirectoryOperations, FileOperations, PathOperations


class RealFileSystem:
    """Production filesystem implementation.

    Gives access to the real file, directory and path operations.
    Satisfies the FileSystem protocol structurally.
    """

    def __init__(
        self,
        file: FileOperations | None = None,
        directory: DirectoryOperations | None = None,
        path: PathOperations | None = None,
    ) -> None:
        """Initialize the filesystem.

        Args:
            file: File operations. Defaults to RealFile.
            directory: Directory operations. Defaults to a RealDirectory
                copying files through the file operations.
            path: Path operations. Defaults to RealPath.
        """
        self.file = file or RealFile()
        self.directory = directory or RealDirectory(file=self.file)
        self.path = path or RealPath()
