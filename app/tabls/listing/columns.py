"""Column projection.

Each display column is a named formatter that turns one DirectoryEntry
into one string. Columns never depend on each other, so any combination
of column flags is served by filtering one fixed, ordered column list.
"""

import grp
import pwd
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Literal

from tabls.listing.models import ColumnFlag, DirectoryEntry

SIZE_UNITS: tuple[str, ...] = ("B", "K", "M", "G", "T", "P")

# (mask, letter) pairs for owner, group and other
_PERMISSION_BITS: tuple[tuple[int, str], ...] = (
    (0o400, "r"),
    (0o200, "w"),
    (0o100, "x"),
    (0o040, "r"),
    (0o020, "w"),
    (0o010, "x"),
    (0o004, "r"),
    (0o002, "w"),
    (0o001, "x"),
)


def human_readable_size(size_bytes: int) -> str:
    """Format a byte count with a binary unit suffix.

    The value is divided by 1024 until it drops below 1024 or the largest
    unit is reached. Scaled values below 10 keep one decimal place unless
    it is zero.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Compact size string, e.g. "950B", "1.5K", "10M".
    """
    value = float(size_bytes)
    unit_index = 0
    while value >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1

    if value >= 10 or unit_index == 0:
        text = f"{value:.0f}"
    else:
        text = f"{value:.1f}".removesuffix(".0")
    return f"{text}{SIZE_UNITS[unit_index]}"


def format_permission(permission_bits: int, is_directory: bool) -> str:
    """Render mode bits as a 10-character ls-style string (e.g. "drwxr-xr-x")."""
    kind = "d" if is_directory else "-"
    return kind + "".join(
        letter if permission_bits & mask else "-" for mask, letter in _PERMISSION_BITS
    )


def format_date(value: datetime | None) -> str:
    """Render a timestamp as "Tue Jan  7 2025"; empty if unavailable."""
    if value is None:
        return ""
    return f"{value:%a %b} {value.day:>2} {value.year}"


class IdNameResolver:
    """Resolves numeric user and group ids to names.

    Lookups are memoized per instance; create one per listing.
    """

    def __init__(self) -> None:
        self._users: dict[int, str] = {}
        self._groups: dict[int, str] = {}

    def user(self, uid: int) -> str:
        """Return the user name for uid, or the id itself if unknown."""
        if uid not in self._users:
            try:
                self._users[uid] = pwd.getpwuid(uid).pw_name
            except KeyError:
                self._users[uid] = str(uid)
        return self._users[uid]

    def group(self, gid: int) -> str:
        """Return the group name for gid, or the id itself if unknown."""
        if gid not in self._groups:
            try:
                self._groups[gid] = grp.getgrgid(gid).gr_name
            except KeyError:
                self._groups[gid] = str(gid)
        return self._groups[gid]


class ColumnKey(str, Enum):
    """Individual display columns, declared in canonical display order."""

    NAME = "name"
    TYPE = "type"
    SIZE = "size"
    BYTES = "bytes"
    MODIFIED = "modified"
    ACCESSED = "accessed"
    CREATED = "created"
    PERMISSION = "permission"
    OWNER = "owner"
    GROUP = "group"


ALWAYS_SHOWN: frozenset[ColumnKey] = frozenset({ColumnKey.NAME, ColumnKey.TYPE})

FLAG_COLUMNS: dict[ColumnFlag, tuple[ColumnKey, ...]] = {
    ColumnFlag.SIZE: (ColumnKey.SIZE,),
    ColumnFlag.BINARY: (ColumnKey.BYTES,),
    ColumnFlag.PERMISSION: (ColumnKey.PERMISSION,),
    ColumnFlag.MODIFIED_TIME: (ColumnKey.MODIFIED,),
    ColumnFlag.MAC: (ColumnKey.MODIFIED, ColumnKey.ACCESSED, ColumnKey.CREATED),
    ColumnFlag.GROUP_AND_OWNER: (ColumnKey.OWNER, ColumnKey.GROUP),
}


@dataclass(frozen=True, slots=True)
class Column:
    """A display column.

    Attributes:
        key: Column identifier.
        header: Header text.
        style: Theme style name applied to every cell.
        render: Formatter producing the cell text for an entry.
        justify: Horizontal alignment of the cells.
    """

    key: ColumnKey
    header: str
    style: str
    render: Callable[[DirectoryEntry], str]
    justify: Literal["left", "right"] = "left"


def column_keys(flags: Iterable[ColumnFlag]) -> set[ColumnKey]:
    """Expand column flags into the set of columns to show."""
    keys = set(ALWAYS_SHOWN)
    for flag in flags:
        keys.update(FLAG_COLUMNS[flag])
    return keys


def build_columns(
    flags: Iterable[ColumnFlag] = (),
    resolver: IdNameResolver | None = None,
) -> list[Column]:
    """Build the visible columns for a set of flags.

    Args:
        flags: Requested column flags. Name and Type are always included.
        resolver: Id-to-name resolver for the owner/group columns. A new
            one is created if not given.

    Returns:
        Selected columns in canonical order.
    """
    names = resolver or IdNameResolver()
    available = (
        Column(ColumnKey.NAME, "Name", "entry_name", lambda e: e.name),
        Column(ColumnKey.TYPE, "Type", "entry_type", lambda e: e.entry_type.value),
        Column(
            ColumnKey.SIZE,
            "Size",
            "size",
            lambda e: human_readable_size(e.size_bytes),
            justify="right",
        ),
        Column(ColumnKey.BYTES, "Bytes", "byte_count", lambda e: str(e.size_bytes), "right"),
        Column(ColumnKey.MODIFIED, "Modified", "modified", lambda e: format_date(e.modified_time)),
        Column(ColumnKey.ACCESSED, "Accessed", "accessed", lambda e: format_date(e.accessed_time)),
        Column(ColumnKey.CREATED, "Created", "created", lambda e: format_date(e.created_time)),
        Column(
            ColumnKey.PERMISSION,
            "Permission",
            "permission",
            lambda e: format_permission(e.permission_bits, e.is_directory),
        ),
        Column(ColumnKey.OWNER, "Owner", "owner", lambda e: names.user(e.owner_id)),
        Column(ColumnKey.GROUP, "Group", "group", lambda e: names.group(e.group_id)),
    )

    wanted = column_keys(flags)
    return [column for column in available if column.key in wanted]


def project(entry: DirectoryEntry, columns: Iterable[Column]) -> tuple[str, ...]:
    """Format one entry as a display row."""
    return tuple(column.render(entry) for column in columns)
