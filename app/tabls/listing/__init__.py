"""Directory listing pipeline.

This package enumerates directory entries, filters and sorts them, and
projects them into display columns.
"""

from tabls.listing.columns import (
    Column,
    ColumnKey,
    IdNameResolver,
    build_columns,
    format_date,
    format_permission,
    human_readable_size,
    project,
)
from tabls.listing.enumerator import (
    ListingError,
    PathMissingError,
    PathUnknownError,
    check_path,
    enumerate_entries,
)
from tabls.listing.filters import EntryFilter, filter_entries
from tabls.listing.lister import DirectoryLister
from tabls.listing.models import ColumnFlag, DirectoryEntry, EntryType, SortField
from tabls.listing.sorting import SORT_KEYS, sort_entries

__all__ = [
    "SORT_KEYS",
    "Column",
    "ColumnFlag",
    "ColumnKey",
    "DirectoryEntry",
    "DirectoryLister",
    "EntryFilter",
    "EntryType",
    "IdNameResolver",
    "ListingError",
    "PathMissingError",
    "PathUnknownError",
    "SortField",
    "build_columns",
    "check_path",
    "enumerate_entries",
    "filter_entries",
    "format_date",
    "format_permission",
    "human_readable_size",
    "project",
    "sort_entries",
]
