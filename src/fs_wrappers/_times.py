"""Timestamp helpers shared by the file and directory wrappers."""

from __future__ import annotations

import os
from datetime import datetime, timezone

from fs_wrappers.types import StrPath


def _creation_timestamp(st: os.stat_result) -> float:
    # st_ctime is the metadata change time on Linux, the closest available value.
    return getattr(st, "st_birthtime", st.st_ctime)


def creation_time(path: StrPath, utc: bool = False) -> datetime:
    return _to_datetime(_creation_timestamp(os.stat(path)), utc)


def last_access_time(path: StrPath, utc: bool = False) -> datetime:
    return _to_datetime(os.stat(path).st_atime, utc)


def last_write_time(path: StrPath, utc: bool = False) -> datetime:
    return _to_datetime(os.stat(path).st_mtime, utc)


def set_last_access_time(path: StrPath, when: datetime, utc: bool = False) -> None:
    st = os.stat(path)
    os.utime(path, (_to_timestamp(when, utc), st.st_mtime))


def set_last_write_time(path: StrPath, when: datetime, utc: bool = False) -> None:
    st = os.stat(path)
    os.utime(path, (st.st_atime, _to_timestamp(when, utc)))


def _to_datetime(timestamp: float, utc: bool) -> datetime:
    if utc:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return datetime.fromtimestamp(timestamp)


def _to_timestamp(when: datetime, utc: bool) -> float:
    """Convert a datetime to a POSIX timestamp.

    Naive values are taken as UTC when utc is set and as local time otherwise.
    """
    if utc and when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return when.timestamp()
