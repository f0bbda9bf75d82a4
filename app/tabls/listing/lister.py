"""Directory lister.

Runs the enumerate -> filter -> sort pipeline for one directory.
"""

import logging
from pathlib import Path

from tabls.listing.enumerator import enumerate_entries
from tabls.listing.filters import EntryFilter, filter_entries
from tabls.listing.models import DirectoryEntry, SortField
from tabls.listing.sorting import sort_entries

logger = logging.getLogger(__name__)


class DirectoryLister:
    """Lists, filters and sorts the children of a directory.

    Args:
        show_hidden: Include entries whose name starts with a dot.
        directories_only: Include only directories.
        git_ignore: Exclude an entry literally named ".gitignore".
        sort: Field to sort by.
        reverse: Reverse the sorted list.

    Example:
        >>> lister = DirectoryLister(sort=SortField.CONTENT, reverse=True)
        >>> for entry in lister.list(Path(".")):
        ...     print(entry.name, entry.size_bytes)
    """

    def __init__(
        self,
        *,
        show_hidden: bool = False,
        directories_only: bool = False,
        git_ignore: bool = False,
        sort: SortField = SortField.NAME,
        reverse: bool = False,
    ) -> None:
        self._filter = EntryFilter(
            show_hidden=show_hidden,
            directories_only=directories_only,
            git_ignore=git_ignore,
        )
        self._sort = sort
        self._reverse = reverse

    @property
    def entry_filter(self) -> EntryFilter:
        """Return the filter applied to enumerated entries."""
        return self._filter

    def list(self, path: Path) -> list[DirectoryEntry]:
        """List the directory at path.

        The caller is expected to have checked that the path exists.
        An unreadable directory produces an empty list.

        Args:
            path: Directory to list.

        Returns:
            Filtered and sorted entries.
        """
        entries = enumerate_entries(path)
        kept = filter_entries(entries, self._filter)
        logger.debug(
            "Listed %s: %d entries, %d after filtering", path, len(entries), len(kept)
        )
        return sort_entries(kept, self._sort, reverse=self._reverse)
