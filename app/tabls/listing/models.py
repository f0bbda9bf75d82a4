"""Listing domain models.

This module defines the data structures shared by every stage of the
listing pipeline: the per-entry metadata snapshot, the entry type tag,
the supported sort fields and the user-facing column groups.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class EntryType(str, Enum):
    """Two-valued type tag shown in the Type column."""

    FILE = "File"
    DIR = "Dir"


class SortField(str, Enum):
    """Fields a listing can be ordered by.

    Attributes:
        NAME: Raw file name.
        CONTENT: Size in bytes.
        EXTENSION: Text after the last dot of the name.
        MODIFIED: Last modification time.
        CHANGED: Last inode status change time.
        ACCESSED: Last access time.
        CREATED: Creation (birth) time.
        INODE: File-system identifier.
        FILE_TYPE: Directories first, then files, each by name.
        NONE: Keep enumeration order.
    """

    NAME = "name"
    CONTENT = "content"
    EXTENSION = "extension"
    MODIFIED = "modified"
    CHANGED = "changed"
    ACCESSED = "accessed"
    CREATED = "created"
    INODE = "inode"
    FILE_TYPE = "file-type"
    NONE = "none"


class ColumnFlag(str, Enum):
    """Optional column groups a user can switch on.

    The name and type columns are always shown; each flag adds one or
    more columns on top of them.
    """

    SIZE = "size"
    BINARY = "binary"
    PERMISSION = "permission"
    MODIFIED_TIME = "modified-time"
    MAC = "mac"
    GROUP_AND_OWNER = "group-and-owner"


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """Metadata snapshot of one child of the listed directory.

    Timestamps are timezone-aware UTC datetimes, or None when the
    platform or filesystem does not provide them.

    Attributes:
        name: Base name of the entry (not the full path).
        is_directory: True if the entry is a directory.
        size_bytes: Byte length (0 for directories).
        modified_time: Last modification time.
        accessed_time: Last access time.
        changed_time: Last inode status change time.
        created_time: Creation (birth) time.
        inode: File-system identifier, used only for sorting.
        permission_bits: The nine owner/group/other rwx bits.
        owner_id: Numeric user id of the owner.
        group_id: Numeric group id.
    """

    name: str
    is_directory: bool
    size_bytes: int
    modified_time: datetime | None
    accessed_time: datetime | None
    changed_time: datetime | None
    created_time: datetime | None
    inode: int
    permission_bits: int
    owner_id: int
    group_id: int

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)
        if self.size_bytes < 0:
            msg = f"Size cannot be negative, got {self.size_bytes}"
            raise ValueError(msg)

    @property
    def entry_type(self) -> EntryType:
        """Return the File/Dir type tag."""
        return EntryType.DIR if self.is_directory else EntryType.FILE

    @property
    def is_hidden(self) -> bool:
        """Check if the entry is a dotfile."""
        return self.name.startswith(".")

    @property
    def extension(self) -> str:
        """Return the text after the last dot, or "" if there is none.

        A dot at the very start marks a hidden file, not an extension, so
        ".bashrc" has none while "..bashrc" has "bashrc".
        """
        stem, _, suffix = self.name.rpartition(".")
        return suffix if stem else ""
