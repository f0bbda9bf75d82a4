"""Entry filtering.

All predicates are ANDed, so evaluation order does not change the result.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from tabls.listing.models import DirectoryEntry

# Only this literal name is dropped by the ignore predicate; no
# .gitignore patterns are read.
GITIGNORE_NAME = ".gitignore"


@dataclass(frozen=True, slots=True)
class EntryFilter:
    """Predicate set deciding which entries are listed.

    Attributes:
        show_hidden: Keep entries whose name starts with a dot.
        directories_only: Drop everything that is not a directory.
        git_ignore: Drop an entry literally named ".gitignore".
    """

    show_hidden: bool = False
    directories_only: bool = False
    git_ignore: bool = False

    def accepts(self, entry: DirectoryEntry) -> bool:
        """Check whether an entry passes every enabled predicate."""
        if entry.is_hidden and not self.show_hidden:
            return False
        if self.directories_only and not entry.is_directory:
            return False
        return not (self.git_ignore and entry.name == GITIGNORE_NAME)


def filter_entries(
    entries: Iterable[DirectoryEntry], entry_filter: EntryFilter
) -> list[DirectoryEntry]:
    """Keep the entries accepted by the filter, preserving order."""
    return [entry for entry in entries if entry_filter.accepts(entry)]
