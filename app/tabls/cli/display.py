"""Rich rendering of directory listings.

Turns sorted entries and the selected columns into a borderless Rich
table, the way `ls -l` output looks, with one theme style per column.
"""

from collections.abc import Iterable, Sequence
from pathlib import Path

from rich.cells import cell_len
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from tabls.listing.columns import Column, project
from tabls.listing.models import DirectoryEntry
from tabls.utils.formatting import console


def _column_width(header: str, values: Iterable[str]) -> int:
    """Return the widest cell of a column, header included."""
    return max(cell_len(value) for value in (header, *values))


def create_listing_table(entries: Sequence[DirectoryEntry], columns: Sequence[Column]) -> Table:
    """Create a Rich table for a directory listing.

    Cells are added as plain Text so file names are never parsed as
    Rich markup. Each column is at least as wide as its longest cell,
    so a narrow console never truncates a value.

    Args:
        entries: Entries in display order.
        columns: Columns to show, in display order.

    Returns:
        Rich Table with one row per entry.
    """
    rows = [project(entry, columns) for entry in entries]

    table = Table(
        box=None,
        show_header=True,
        header_style="table_header",
        show_edge=False,
        pad_edge=False,
    )
    for index, column in enumerate(columns):
        table.add_column(
            column.header,
            style=column.style,
            justify=column.justify,
            no_wrap=True,
            min_width=_column_width(column.header, (row[index] for row in rows)),
        )

    for row in rows:
        table.add_row(*(Text(value) for value in row))

    return table


def print_listing(entries: Sequence[DirectoryEntry], columns: Sequence[Column]) -> None:
    """Print the listing table.

    Lines wider than the console are written whole instead of cropped.
    """
    console.print(create_listing_table(entries, columns), crop=False)


def print_path_header(path: Path) -> None:
    """Print the "Path: ..." line that precedes every listing."""
    console.print(f"Path: {escape(str(path))}", highlight=False, soft_wrap=True)
