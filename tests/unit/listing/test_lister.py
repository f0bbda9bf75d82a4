"""Tests for DirectoryLister."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

from tabls.listing.filters import EntryFilter
from tabls.listing.lister import DirectoryLister
from tabls.listing.models import DirectoryEntry, SortField

EntryFactory = Callable[..., DirectoryEntry]


def _names(entries: list[DirectoryEntry]) -> list[str]:
    return [e.name for e in entries]


class TestDirectoryLister:
    """Tests for the enumerate -> filter -> sort pipeline."""

    def test_default_listing(self, sample_dir: Path) -> None:
        """Hidden entries are excluded and the rest name-sorted."""
        entries = DirectoryLister().list(sample_dir)

        assert _names(entries) == ["A.txt", "b.txt", "sub"]
        assert [e.entry_type.value for e in entries] == ["File", "File", "Dir"]

    def test_show_hidden(self, sample_dir: Path) -> None:
        """show_hidden adds dotfiles."""
        entries = DirectoryLister(show_hidden=True).list(sample_dir)
        assert _names(entries) == [".hidden", "A.txt", "b.txt", "sub"]

    def test_directories_only(self, sample_dir: Path) -> None:
        """directories_only keeps just the subdirectory."""
        assert _names(DirectoryLister(directories_only=True).list(sample_dir)) == ["sub"]

    def test_git_ignore(self, sample_dir: Path) -> None:
        """git_ignore hides a .gitignore file even with show_hidden."""
        (sample_dir / ".gitignore").write_text("*.pyc\n")

        entries = DirectoryLister(show_hidden=True, git_ignore=True).list(sample_dir)

        assert ".gitignore" not in _names(entries)
        assert ".hidden" in _names(entries)

    def test_sort_and_reverse(self, sample_dir: Path) -> None:
        """Entries are sorted by the chosen field, then reversed."""
        entries = DirectoryLister(sort=SortField.CONTENT, reverse=True).list(sample_dir)
        assert _names(entries)[0] == "b.txt"

    def test_file_type_sort(self, sample_dir: Path) -> None:
        """Directories come before files."""
        entries = DirectoryLister(sort=SortField.FILE_TYPE).list(sample_dir)
        assert _names(entries) == ["sub", "A.txt", "b.txt"]

    def test_unreadable_directory_is_empty(self, tmp_path: Path) -> None:
        """A path that cannot be listed yields an empty result."""
        assert DirectoryLister().list(tmp_path / "missing") == []

    def test_pipeline_order(self, make_entry: EntryFactory) -> None:
        """Filtering happens before sorting and reversal."""
        raw = [
            make_entry("c", size_bytes=3),
            make_entry(".a", size_bytes=1),
            make_entry("b", size_bytes=2),
        ]
        with patch("tabls.listing.lister.enumerate_entries", return_value=raw) as mock_enum:
            entries = DirectoryLister(sort=SortField.CONTENT, reverse=True).list(Path("/x"))

        mock_enum.assert_called_once_with(Path("/x"))
        assert _names(entries) == ["c", "b"]

    def test_entry_filter_exposed(self) -> None:
        """The configured filter is available for inspection."""
        lister = DirectoryLister(show_hidden=True, git_ignore=True)
        assert lister.entry_filter == EntryFilter(show_hidden=True, git_ignore=True)
