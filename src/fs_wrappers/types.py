"""Shared data types for fs-wrappers."""

from __future__ import annotations

import os
from typing import Union

__all__ = ["DirectoryExistsError", "DirectoryNotFoundError", "StrPath"]

StrPath = Union[str, "os.PathLike[str]"]


class DirectoryNotFoundError(FileNotFoundError):
    """Source directory does not exist or could not be found."""

    pass


class DirectoryExistsError(FileExistsError):
    """Destination directory already exists and overwrite was not requested."""

    pass
