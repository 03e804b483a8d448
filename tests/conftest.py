"""Shared test fixtures."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Iterator
from unittest.mock import MagicMock

import pytest

from fs_wrappers.memory import MemoryFileSystem


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory for testing."""
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path


@pytest.fixture
def temp_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory."""
    config_dir = tmp_path / ".fs-wrappers"
    config_dir.mkdir(parents=True)
    return config_dir


# ============================================================================
# Directory Tree Fixtures
# ============================================================================


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create src/{a.txt="hello", sub/b.txt="world"} on disk."""
    src = tmp_path / "src"
    (src / "sub").mkdir(parents=True)
    (src / "a.txt").write_text("hello")
    (src / "sub" / "b.txt").write_text("world")
    return src


@pytest.fixture
def deep_tree(tmp_path: Path) -> Path:
    """Create a source tree several levels deep, including an empty directory."""
    src = tmp_path / "deep"
    level = src
    for depth in range(5):
        level = level / f"level{depth}"
        level.mkdir(parents=True)
        (level / f"file{depth}.bin").write_bytes(bytes(range(depth * 10)))
    (src / "empty").mkdir()
    (src / "top.txt").write_text("top")
    return src


def _snapshot(root: Path) -> dict[str, bytes | None]:
    """Map each relative path under root to its bytes (None for directories)."""
    result: dict[str, bytes | None] = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        result[rel] = None if path.is_dir() else path.read_bytes()
    return result


@pytest.fixture
def snapshot() -> Callable[[Path], dict[str, bytes | None]]:
    """Return a function capturing names, structure and content of a tree."""
    return _snapshot


# ============================================================================
# Test Double Fixtures
# ============================================================================


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """Create an in-memory filesystem with a second volume at /mnt/usb."""
    return MemoryFileSystem(volumes=["/", "/mnt/usb"])


@pytest.fixture
def memory_source_tree(memory_fs: MemoryFileSystem) -> str:
    """Create /src/{a.txt="hello", sub/b.txt="world"} in memory."""
    memory_fs.directory.create("/src/sub")
    memory_fs.file.write_text("/src/a.txt", "hello")
    memory_fs.file.write_text("/src/sub/b.txt", "world")
    return "/src"


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.directory.exists.return_value = False
    fs.directory.get_files.return_value = []
    fs.directory.get_directories.return_value = []
    fs.path.get_file_name.side_effect = lambda p: p.rsplit("/", 1)[-1]
    return fs


# Writable locations that are often a separate mount (tmpfs) on Linux
_OTHER_MOUNT_CANDIDATES = ("/dev/shm", "/run/shm", "/var/tmp", "/tmp")


@pytest.fixture
def other_mount_dir(tmp_path: Path) -> Iterator[Path]:
    """Create a directory on a different device than tmp_path.

    Skips when symlinks are unsupported or no such device is writable.
    """
    if os.name == "nt":
        pytest.skip("symlinks need extra privileges on Windows")
    tmp_device = os.stat(tmp_path).st_dev
    for candidate in _OTHER_MOUNT_CANDIDATES:
        if not os.path.isdir(candidate) or not os.access(candidate, os.W_OK):
            continue
        if os.stat(candidate).st_dev == tmp_device:
            continue
        target = Path(tempfile.mkdtemp(dir=candidate))
        yield target
        shutil.rmtree(target, ignore_errors=True)
        return
    pytest.skip("no writable directory on another mount")


@pytest.fixture
def link_to_other_mount(tmp_path: Path, other_mount_dir: Path) -> Path:
    """Create tmp_path/link pointing at a directory on another mount."""
    link = tmp_path / "link"
    link.symlink_to(other_mount_dir, target_is_directory=True)
    return link
