"""Tests for RealFile."""

from __future__ import annotations

import os
import stat
from datetime import datetime, timezone
from pathlib import Path

import pytest

from fs_wrappers.files import RealFile
from fs_wrappers.protocols import FileOperations


@pytest.fixture
def file_ops() -> RealFile:
    return RealFile()


class TestRealFileReadWrite:
    """Tests for reading and writing through RealFile."""

    def test_satisfies_protocol(self, file_ops: RealFile) -> None:
        """Test RealFile satisfies the FileOperations protocol."""
        assert isinstance(file_ops, FileOperations)

    def test_exists_only_for_files(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test exists is False for directories and missing paths."""
        test_file = tmp_path / "exists.txt"
        test_file.touch()

        assert file_ops.exists(test_file) is True
        assert file_ops.exists(tmp_path) is False
        assert file_ops.exists(tmp_path / "missing.txt") is False

    def test_text_round_trip(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test writing then reading text."""
        test_file = tmp_path / "output.txt"

        file_ops.write_text(test_file, "Test content", encoding="utf-8")

        assert file_ops.read_text(test_file, encoding="utf-8") == "Test content"

    def test_bytes_round_trip(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test writing then reading bytes."""
        test_file = tmp_path / "data.bin"

        file_ops.write_bytes(test_file, b"\x00\x01\xff")

        assert file_ops.read_bytes(test_file) == b"\x00\x01\xff"

    def test_read_missing_raises(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test reading a non-existent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            file_ops.read_text(tmp_path / "missing.txt")

    def test_lines(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test writing, appending and reading lines."""
        test_file = tmp_path / "lines.txt"

        file_ops.write_lines(test_file, ["one", "two"])
        file_ops.append_lines(test_file, ["three"])
        file_ops.append_text(test_file, "four")

        assert file_ops.read_lines(test_file) == ["one", "two", "three", "four"]
        assert list(file_ops.iter_lines(test_file)) == ["one", "two", "three", "four"]

    def test_open_write_does_not_truncate(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test open_write overwrites from the start without truncating."""
        test_file = tmp_path / "data.bin"
        test_file.write_bytes(b"abcdef")

        with file_ops.open_write(test_file) as f:
            f.write(b"XY")

        assert test_file.read_bytes() == b"XYcdef"

    def test_create_truncates(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test create empties an existing file."""
        test_file = tmp_path / "data.bin"
        test_file.write_bytes(b"abcdef")

        with file_ops.create(test_file) as f:
            f.write(b"XY")

        assert test_file.read_bytes() == b"XY"

    def test_open_text_and_append(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test text stream helpers."""
        test_file = tmp_path / "log.txt"

        with file_ops.create_text(test_file) as f:
            f.write("first\n")
        with file_ops.open_append(test_file) as f:
            f.write("second\n")
        with file_ops.open_text(test_file) as f:
            content = f.read()

        assert content == "first\nsecond\n"


class TestRealFileCopyMove:
    """Tests for copy, move, delete and replace."""

    def test_copy(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test copying a file keeps the source."""
        src = tmp_path / "a.txt"
        src.write_text("hello")
        dst = tmp_path / "b.txt"

        file_ops.copy(src, dst)

        assert dst.read_text() == "hello"
        assert src.exists()

    def test_copy_existing_without_overwrite(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test copy refuses an existing destination by default."""
        src = tmp_path / "a.txt"
        src.write_text("new")
        dst = tmp_path / "b.txt"
        dst.write_text("old")

        with pytest.raises(FileExistsError):
            file_ops.copy(src, dst)
        assert dst.read_text() == "old"

    def test_copy_existing_with_overwrite(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test copy replaces the destination when asked."""
        src = tmp_path / "a.txt"
        src.write_text("new")
        dst = tmp_path / "b.txt"
        dst.write_text("old")

        file_ops.copy(src, dst, overwrite=True)

        assert dst.read_text() == "new"

    def test_copy_missing_source(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test copying a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            file_ops.copy(tmp_path / "missing.txt", tmp_path / "b.txt")

    def test_move(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test moving a file removes the source."""
        src = tmp_path / "a.txt"
        src.write_text("hello")
        dst = tmp_path / "b.txt"

        file_ops.move(src, dst)

        assert not src.exists()
        assert dst.read_text() == "hello"

    def test_move_existing_without_overwrite(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test move refuses an existing destination by default."""
        src = tmp_path / "a.txt"
        src.write_text("new")
        dst = tmp_path / "b.txt"
        dst.write_text("old")

        with pytest.raises(FileExistsError):
            file_ops.move(src, dst)
        assert src.exists()

    def test_move_onto_directory_raises(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test move does not move into a directory."""
        src = tmp_path / "a.txt"
        src.write_text("new")
        (tmp_path / "dir").mkdir()

        with pytest.raises(IsADirectoryError):
            file_ops.move(src, tmp_path / "dir", overwrite=True)

    def test_delete(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test deleting a file, and a missing file raising."""
        test_file = tmp_path / "to_delete.txt"
        test_file.touch()

        file_ops.delete(test_file)

        assert not test_file.exists()
        with pytest.raises(FileNotFoundError):
            file_ops.delete(test_file)

    def test_replace_with_backup(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test replace swaps content and keeps a backup of the old file."""
        src = tmp_path / "new.txt"
        src.write_text("new")
        dst = tmp_path / "current.txt"
        dst.write_text("old")
        backup = tmp_path / "current.bak"

        file_ops.replace(src, dst, backup)

        assert dst.read_text() == "new"
        assert backup.read_text() == "old"
        assert not src.exists()

    def test_replace_missing_destination(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test replace requires an existing destination."""
        src = tmp_path / "new.txt"
        src.write_text("new")

        with pytest.raises(FileNotFoundError):
            file_ops.replace(src, tmp_path / "missing.txt")

    def test_replace_missing_source_keeps_destination(
        self, file_ops: RealFile, tmp_path: Path
    ) -> None:
        """Test a missing source leaves the destination and backup untouched."""
        dst = tmp_path / "current.txt"
        dst.write_text("old")
        backup = tmp_path / "current.bak"

        with pytest.raises(FileNotFoundError):
            file_ops.replace(tmp_path / "missing.txt", dst, backup)

        assert dst.read_text() == "old"
        assert not backup.exists()


class TestRealFileAttributes:
    """Tests for attributes and timestamps."""

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    def test_attributes(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test reading and changing permission bits."""
        test_file = tmp_path / "perm.txt"
        test_file.touch()

        file_ops.set_attributes(test_file, 0o600)

        assert stat.S_IMODE(file_ops.get_attributes(test_file)) == 0o600
        assert stat.S_ISREG(file_ops.get_attributes(test_file))

    def test_last_write_time_utc(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test setting and reading the modification time in UTC."""
        test_file = tmp_path / "times.txt"
        test_file.touch()
        when = datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

        file_ops.set_last_write_time_utc(test_file, when)

        assert file_ops.get_last_write_time_utc(test_file) == when
        assert test_file.stat().st_mtime == when.timestamp()

    def test_naive_utc_is_treated_as_utc(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test a naive datetime passed to a _utc setter means UTC."""
        test_file = tmp_path / "times.txt"
        test_file.touch()

        file_ops.set_last_access_time_utc(test_file, datetime(2021, 6, 1, 12, 0, 0))

        assert file_ops.get_last_access_time_utc(test_file) == datetime(
            2021, 6, 1, 12, 0, 0, tzinfo=timezone.utc
        )

    def test_local_times_are_naive(self, file_ops: RealFile, tmp_path: Path) -> None:
        """Test local getters return naive datetimes matching the UTC ones."""
        test_file = tmp_path / "times.txt"
        test_file.touch()
        local = datetime(2019, 5, 5, 10, 30, 0)

        file_ops.set_last_write_time(test_file, local)

        assert file_ops.get_last_write_time(test_file) == local
        assert file_ops.get_last_write_time(test_file).tzinfo is None
        assert file_ops.get_creation_time_utc(test_file).tzinfo is timezone.utc
