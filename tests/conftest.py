"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest
from tabls.listing.models import DirectoryEntry


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Directory with a hidden file, two regular files and a subdirectory."""
    root = tmp_path / "listing"
    root.mkdir()
    (root / ".hidden").write_text("secret")
    (root / "b.txt").write_text("b" * 2048)
    (root / "A.txt").write_text("a")
    (root / "sub").mkdir()
    return root


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config is ignored."""
    config_home = tmp_path / "xdg-config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home / "tabls"


def _make_entry(
    name: str,
    *,
    is_directory: bool = False,
    size_bytes: int = 0,
    modified: int | None = 0,
    accessed: int | None = 0,
    changed: int | None = 0,
    created: int | None = None,
    inode: int = 1,
    permission_bits: int = 0o644,
    owner_id: int = 1000,
    group_id: int = 1000,
) -> DirectoryEntry:
    """Create a test DirectoryEntry; timestamps are POSIX seconds."""

    def _ts(value: int | None) -> datetime | None:
        return None if value is None else datetime.fromtimestamp(value, tz=UTC)

    return DirectoryEntry(
        name=name,
        is_directory=is_directory,
        size_bytes=size_bytes,
        modified_time=_ts(modified),
        accessed_time=_ts(accessed),
        changed_time=_ts(changed),
        created_time=_ts(created),
        inode=inode,
        permission_bits=permission_bits,
        owner_id=owner_id,
        group_id=group_id,
    )


@pytest.fixture
def make_entry() -> Callable[..., DirectoryEntry]:
    """Factory for in-memory DirectoryEntry objects."""
    return _make_entry
