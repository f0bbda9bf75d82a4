"""Unit tests for listing models."""

from collections.abc import Callable

import pytest
from tabls.listing.models import ColumnFlag, DirectoryEntry, EntryType, SortField

EntryFactory = Callable[..., DirectoryEntry]


class TestDirectoryEntry:
    """Tests for the DirectoryEntry dataclass."""

    def test_entry_type_file(self, make_entry: EntryFactory) -> None:
        """Regular files are tagged File."""
        assert make_entry("a.txt").entry_type == EntryType.FILE
        assert make_entry("a.txt").entry_type.value == "File"

    def test_entry_type_dir(self, make_entry: EntryFactory) -> None:
        """Directories are tagged Dir."""
        assert make_entry("src", is_directory=True).entry_type.value == "Dir"

    def test_is_frozen(self, make_entry: EntryFactory) -> None:
        """Entries are immutable."""
        entry = make_entry("a.txt")
        with pytest.raises(AttributeError):
            entry.name = "b.txt"  # type: ignore[misc]

    def test_empty_name_rejected(self, make_entry: EntryFactory) -> None:
        """An empty name is invalid."""
        with pytest.raises(ValueError, match="name cannot be empty"):
            make_entry("")

    def test_negative_size_rejected(self, make_entry: EntryFactory) -> None:
        """A negative size is invalid."""
        with pytest.raises(ValueError, match="cannot be negative"):
            make_entry("a.txt", size_bytes=-1)

    def test_is_hidden(self, make_entry: EntryFactory) -> None:
        """Dotfiles are hidden, other names are not."""
        assert make_entry(".env").is_hidden is True
        assert make_entry("env").is_hidden is False


class TestExtension:
    """Tests for the extension property."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("notes.txt", "txt"),
            ("archive.tar.gz", "gz"),
            ("Makefile", ""),
            (".bashrc", ""),
            ("..bashrc", "bashrc"),
            (".config.toml", "toml"),
            ("trailing.", ""),
        ],
    )
    def test_extension(self, make_entry: EntryFactory, name: str, expected: str) -> None:
        """Extension is the text after the last dot, ignoring a dot at the very start."""
        assert make_entry(name).extension == expected


class TestEnums:
    """Tests for the user-facing enum values."""

    def test_sort_field_values(self) -> None:
        """Sort field values match the CLI vocabulary."""
        assert [f.value for f in SortField] == [
            "name",
            "content",
            "extension",
            "modified",
            "changed",
            "accessed",
            "created",
            "inode",
            "file-type",
            "none",
        ]

    def test_column_flag_from_string(self) -> None:
        """Column flags can be built from their config spelling."""
        assert ColumnFlag("group-and-owner") is ColumnFlag.GROUP_AND_OWNER
        assert ColumnFlag("modified-time") is ColumnFlag.MODIFIED_TIME
