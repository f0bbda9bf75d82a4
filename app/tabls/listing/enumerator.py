"""Directory enumeration.

Lists the immediate children of a directory and pairs each one with a
metadata snapshot. Enumeration is best-effort: an unreadable directory
produces an empty listing, and children whose metadata cannot be read
are dropped instead of failing the whole run.
"""

import logging
import os
import stat
from datetime import UTC, datetime
from pathlib import Path

from tabls.listing.models import DirectoryEntry

logger = logging.getLogger(__name__)

# Shown in place of names that cannot be represented as UTF-8
UNKNOWN_NAME = "UNKNOWN NAME"


class ListingError(Exception):
    """Base exception for path-level listing failures."""


class PathMissingError(ListingError):
    """Raised when the listed path does not exist."""


class PathUnknownError(ListingError):
    """Raised when the existence of the listed path cannot be determined."""


def check_path(path: Path) -> None:
    """Check that a path exists before listing it.

    Args:
        path: Path to check.

    Raises:
        PathMissingError: If the path does not exist.
        PathUnknownError: If the check itself fails (e.g. permission denied
            on a parent directory).
    """
    try:
        os.stat(path)
    except FileNotFoundError as e:
        raise PathMissingError(f"Path doesn't exist: {path}") from e
    except OSError as e:
        raise PathUnknownError(f"Cannot determine whether {path} exists: {e}") from e


def _to_datetime(timestamp: float | None) -> datetime | None:
    """Convert a POSIX timestamp to an aware UTC datetime."""
    if timestamp is None:
        return None
    try:
        return datetime.fromtimestamp(timestamp, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return None


def _display_name(name: str) -> str:
    """Return the name, or a placeholder if it is not valid UTF-8.

    Undecodable bytes in file names surface as lone surrogates, which
    cannot be encoded back to UTF-8.
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return UNKNOWN_NAME
    return name


def entry_from_stat(name: str, st: os.stat_result) -> DirectoryEntry:
    """Build a DirectoryEntry from a stat result.

    Args:
        name: Base name of the entry.
        st: Stat result for the entry (symlinks already followed).

    Returns:
        Immutable metadata snapshot.
    """
    is_directory = stat.S_ISDIR(st.st_mode)
    return DirectoryEntry(
        name=_display_name(name),
        is_directory=is_directory,
        size_bytes=0 if is_directory else st.st_size,
        modified_time=_to_datetime(st.st_mtime),
        accessed_time=_to_datetime(st.st_atime),
        changed_time=_to_datetime(st.st_ctime),
        # Only some platforms record a birth time
        created_time=_to_datetime(getattr(st, "st_birthtime", None)),
        inode=st.st_ino,
        permission_bits=stat.S_IMODE(st.st_mode) & 0o777,
        owner_id=st.st_uid,
        group_id=st.st_gid,
    )


def read_entry(dirent: os.DirEntry[str]) -> DirectoryEntry | None:
    """Read the metadata of one directory child.

    Args:
        dirent: Entry yielded by os.scandir.

    Returns:
        The entry snapshot, or None if its metadata cannot be read
        (removed mid-scan, broken symlink, permission denied).
    """
    try:
        st = dirent.stat()
    except OSError as e:
        logger.debug("Skipping unreadable entry %s: %s", dirent.path, e)
        return None
    return entry_from_stat(dirent.name, st)


def enumerate_entries(path: Path) -> list[DirectoryEntry]:
    """List the immediate children of a directory.

    Order is whatever the filesystem returns and must not be relied on.

    Args:
        path: Directory to list.

    Returns:
        Snapshots of every readable child; empty if the directory itself
        cannot be read.
    """
    try:
        with os.scandir(path) as it:
            results = [read_entry(dirent) for dirent in it]
    except OSError as e:
        logger.debug("Cannot read directory %s: %s", path, e)
        return []

    return [entry for entry in results if entry is not None]
