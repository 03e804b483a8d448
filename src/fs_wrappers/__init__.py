"""Injectable file, directory and path operations with test doubles."""

__version__ = "0.1.0"

# Export protocol interfaces for type hints and dependency injection
from fs_wrappers.protocols import (
    DirectoryOperations,
    FileOperations,
    FileSystem,
    PathOperations,
)
from fs_wrappers.types import DirectoryExistsError, DirectoryNotFoundError

__all__ = [
    "__version__",
    "DirectoryExistsError",
    "DirectoryNotFoundError",
    "DirectoryOperations",
    "FileOperations",
    "FileSystem",
    "PathOperations",
]
