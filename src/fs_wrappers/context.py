"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

The filesystem is typed using the FileSystem Protocol rather than a concrete
implementation, so a MemoryFileSystem or a mock can be injected without
inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from fs_wrappers.config import ConfigManager
from fs_wrappers.protocols import FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from fs_wrappers.filesystem import RealFileSystem

    return RealFileSystem()


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for all services used by CLI commands.
    """

    config: ConfigManager
    filesystem: FileSystem = field(default_factory=_default_filesystem)


def create_context(config_dir: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct AppContext directly with test doubles.

    Args:
        config_dir: Override config directory (for testing).

    Returns:
        Configured AppContext with all dependencies.
    """
    from fs_wrappers.filesystem import RealFileSystem

    config = (
        ConfigManager.create(config_dir) if config_dir else ConfigManager.create_default()
    )
    return AppContext(config=config, filesystem=RealFileSystem())
