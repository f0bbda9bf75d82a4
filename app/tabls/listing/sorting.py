"""Entry sorting.

Each sort field maps to a key function in SORT_KEYS. Sorting is stable,
so entries with equal keys keep their enumeration order, and reversal
inverts the already sorted list rather than sorting in descending order.
"""

from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import Any

from tabls.listing.models import DirectoryEntry, SortField

# Unavailable timestamps sort as the Unix epoch
EPOCH = datetime.fromtimestamp(0, tz=UTC)

SortKey = Callable[[DirectoryEntry], Any]


def _timestamp_or_epoch(value: datetime | None) -> datetime:
    return value if value is not None else EPOCH


SORT_KEYS: dict[SortField, SortKey] = {
    SortField.NAME: lambda e: e.name,
    SortField.CONTENT: lambda e: e.size_bytes,
    SortField.EXTENSION: lambda e: e.extension,
    SortField.MODIFIED: lambda e: _timestamp_or_epoch(e.modified_time),
    SortField.CHANGED: lambda e: _timestamp_or_epoch(e.changed_time),
    SortField.ACCESSED: lambda e: _timestamp_or_epoch(e.accessed_time),
    SortField.CREATED: lambda e: _timestamp_or_epoch(e.created_time),
    SortField.INODE: lambda e: e.inode,
    SortField.FILE_TYPE: lambda e: (not e.is_directory, e.name),
}


def sort_entries(
    entries: Iterable[DirectoryEntry],
    field: SortField = SortField.NAME,
    *,
    reverse: bool = False,
) -> list[DirectoryEntry]:
    """Order entries by a single field.

    Args:
        entries: Entries to sort.
        field: Field to sort by. SortField.NONE keeps the input order.
        reverse: Invert the list after sorting.

    Returns:
        A new sorted list.
    """
    key = SORT_KEYS.get(field)
    ordered = sorted(entries, key=key) if key is not None else list(entries)
    if reverse:
        ordered.reverse()
    return ordered
