"""Recursive directory copy and volume-aware directory move."""

from __future__ import annotations

import errno
import logging
import os

from fs_wrappers.protocols import DirectoryOperations, FileOperations
from fs_wrappers.types import DirectoryExistsError, DirectoryNotFoundError, StrPath

logger = logging.getLogger(__name__)


class TreeOperations:
    """Copies and moves whole directory trees.

    Built only on a directory collaborator and a file collaborator, so the
    same logic runs against the real disk or any test double.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(self, directory: DirectoryOperations, file: FileOperations) -> None:
        """Initialize tree operations with required dependencies.

        Args:
            directory: Directory operations (required).
            file: File operations (required).
        """
        self.directory = directory
        self.file = file

    @classmethod
    def create(
        cls,
        directory: DirectoryOperations | None = None,
        file: FileOperations | None = None,
    ) -> TreeOperations:
        """Factory method for production instantiation.

        Args:
            directory: Optional directory operations (real disk if not provided).
            file: Optional file operations (real disk if not provided).

        Returns:
            Configured TreeOperations instance.
        """
        from fs_wrappers.directories import RealDirectory
        from fs_wrappers.files import RealFile

        file = file or RealFile()
        return cls(directory=directory or RealDirectory(file=file), file=file)

    def copy_tree(self, source_dir: StrPath, dest_dir: StrPath, overwrite: bool = False) -> None:
        """Copy a directory and its content to a destination.

        Files of each directory are copied before its subdirectories are
        descended into. A failure aborts the copy; whatever was already
        written below dest_dir stays there.

        Args:
            source_dir: The directory to copy.
            dest_dir: The directory to copy to. Created if missing.
            overwrite: Copy into an existing dest_dir and replace its files.

        Raises:
            ValueError: If either path is empty, or dest_dir is source_dir
                or lies inside it.
            DirectoryNotFoundError: If source_dir is not an existing directory.
            DirectoryExistsError: If dest_dir exists and overwrite is False.
            FileExistsError: If a destination file exists and overwrite is False.
        """
        source_dir, dest_dir = _check_paths(source_dir, dest_dir)
        self._check_source(source_dir)
        _check_not_nested(source_dir, dest_dir)
        if not overwrite and self.directory.exists(dest_dir):
            raise _dest_exists(dest_dir)

        self._copy(source_dir, dest_dir, overwrite)

    def move_tree(self, source_dir: StrPath, dest_dir: StrPath, overwrite: bool = False) -> None:
        """Move a directory and its content to a destination.

        On the same volume the directory is renamed. Across volumes it is
        copied and the source is deleted once the copy has fully succeeded.

        Args:
            source_dir: The directory to move.
            dest_dir: The destination. Replaced as a whole when overwrite is
                set and both paths share a volume.
            overwrite: Replace an existing dest_dir.

        Raises:
            ValueError: If either path is empty, or dest_dir is source_dir
                or lies inside it.
            DirectoryNotFoundError: If source_dir is not an existing directory.
            DirectoryExistsError: If dest_dir exists and overwrite is False.
        """
        source_dir, dest_dir = _check_paths(source_dir, dest_dir)
        self._check_source(source_dir)
        _check_not_nested(source_dir, dest_dir)
        if not overwrite and self.directory.exists(dest_dir):
            raise _dest_exists(dest_dir)

        src_root = self.directory.get_root(source_dir)
        dst_root = self.directory.get_root(dest_dir)

        if src_root == dst_root:
            if overwrite and self.directory.exists(dest_dir):
                logger.debug("Removing existing destination %s", dest_dir)
                self.directory.delete(dest_dir, recursive=True)
            logger.debug("Renaming %s to %s on %s", source_dir, dest_dir, src_root)
            self.directory.move(source_dir, dest_dir)
            return

        logger.debug(
            "Moving %s (%s) to %s (%s) by copy", source_dir, src_root, dest_dir, dst_root
        )
        self.copy_tree(source_dir, dest_dir, overwrite)
        self.directory.delete(source_dir, recursive=True)

    def _copy(self, source_dir: str, dest_dir: str, overwrite: bool) -> None:
        if not self.directory.exists(dest_dir):
            self.directory.create(dest_dir)

        for file_path in self.directory.get_files(source_dir):
            target = os.path.join(dest_dir, os.path.basename(file_path))
            logger.debug("Copying file %s to %s", file_path, target)
            self.file.copy(file_path, target, overwrite)

        for subdir in self.directory.get_directories(source_dir):
            target = os.path.join(dest_dir, os.path.basename(subdir))
            self._copy(subdir, target, overwrite)

    def _check_source(self, source_dir: str) -> None:
        if not self.directory.exists(source_dir):
            raise DirectoryNotFoundError(
                errno.ENOENT,
                "Source directory does not exist or could not be found",
                source_dir,
            )


def _check_paths(source_dir: StrPath, dest_dir: StrPath) -> tuple[str, str]:
    """Normalize both paths to strings and reject empty ones."""
    source = os.fspath(source_dir)
    dest = os.fspath(dest_dir)
    if not source:
        raise ValueError("source_dir cannot be empty")
    if not dest:
        raise ValueError("dest_dir cannot be empty")
    return source, dest


def _check_not_nested(source_dir: str, dest_dir: str) -> None:
    """Reject a destination equal to the source or below it."""
    source = os.path.realpath(source_dir)
    dest = os.path.realpath(dest_dir)
    if os.path.splitdrive(source)[0] != os.path.splitdrive(dest)[0]:
        return
    if os.path.commonpath([source, dest]) == source:
        raise ValueError(f"Cannot copy or move {source_dir} into itself: {dest_dir}")


def _dest_exists(dest_dir: str) -> DirectoryExistsError:
    return DirectoryExistsError(
        errno.EEXIST, "The destination directory already exists", dest_dir
    )
