"""Main CLI application entry point.

Defines the Typer application: a single command that lists one directory.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from tabls import __version__
from tabls.cli.display import print_listing, print_path_header
from tabls.core.config import ConfigError, ListingConfig, load_config
from tabls.listing.columns import IdNameResolver, build_columns
from tabls.listing.enumerator import PathMissingError, PathUnknownError, check_path
from tabls.listing.lister import DirectoryLister
from tabls.listing.models import ColumnFlag, SortField
from tabls.utils.formatting import print_error, print_warning, setup_logging

logger = logging.getLogger(__name__)

PATH_MISSING_MESSAGE = "Path doesn't exist. (try other location)"
PATH_UNKNOWN_MESSAGE = "Can't read directory."

SORT_HELP = (
    "Sort by field: name (alphabetical), content (size), extension, "
    "modified, changed (status change), accessed, created, inode, "
    "file-type (directories first), none (filesystem order)."
)

app = typer.Typer(
    name="tabls",
    help=(
        "List directory contents with various display options.\n\n"
        "A modern replacement for 'ls' with colorful output and additional features."
    ),
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"tabls version {__version__}")
        raise typer.Exit()


def _load_config_or_defaults(path: Path | None) -> ListingConfig:
    """Load listing defaults, warning and falling back on errors."""
    try:
        return load_config(path)
    except ConfigError as e:
        print_warning(f"{e} (using defaults)")
        return ListingConfig()


@app.command()
def main(
    path: Annotated[
        Path,
        typer.Argument(help="Directory to list.", show_default=False),
    ] = Path("."),
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Show hidden files (starting with '.')."),
    ] = False,
    dirs: Annotated[
        bool,
        typer.Option("--dirs", "-d", help="Show directories only."),
    ] = False,
    reverse: Annotated[
        bool,
        typer.Option("--reverse", "-r", help="Reverse the sort order."),
    ] = False,
    sort: Annotated[
        SortField | None,
        typer.Option("--sort", "-s", case_sensitive=False, help=SORT_HELP, show_default=False),
    ] = None,
    git_ignore: Annotated[
        bool,
        typer.Option("--git-ignore", help="Hide a .gitignore file."),
    ] = False,
    permission: Annotated[
        bool,
        typer.Option("--permission", "-p", help="Show file permissions in Unix format."),
    ] = False,
    content: Annotated[
        bool,
        typer.Option("--content", "--size", "-c", "-S", help="Show human-readable file sizes."),
    ] = False,
    binary: Annotated[
        bool,
        typer.Option("--binary", "-b", help="Show file sizes in bytes."),
    ] = False,
    modified_time: Annotated[
        bool,
        typer.Option("--modified-time", "-m", help="Show last modification time."),
    ] = False,
    mac: Annotated[
        bool,
        typer.Option("--mac", "-t", help="Show modified, accessed and created times."),
    ] = False,
    group_and_owner: Annotated[
        bool,
        typer.Option(
            "--group_and_owner",
            "--group-and-owner",
            "-g",
            help="Show owner and group names.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Read defaults from this config file.", show_default=False),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging on stderr."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """List directory contents as a table."""
    setup_logging(verbose)
    config = _load_config_or_defaults(config_path)

    target = path.absolute()
    print_path_header(target)

    try:
        check_path(target)
    except PathMissingError as e:
        logger.debug("%s", e)
        print_error(PATH_MISSING_MESSAGE)
        raise typer.Exit(code=1) from e
    except PathUnknownError as e:
        logger.debug("%s", e)
        print_error(PATH_UNKNOWN_MESSAGE)
        raise typer.Exit(code=1) from e

    lister = DirectoryLister(
        show_hidden=show_all or config.all,
        directories_only=dirs or config.dirs,
        git_ignore=git_ignore or config.git_ignore,
        sort=sort if sort is not None else config.sort,
        reverse=reverse or config.reverse,
    )
    entries = lister.list(target)

    requested = {
        ColumnFlag.SIZE: content,
        ColumnFlag.BINARY: binary,
        ColumnFlag.PERMISSION: permission,
        ColumnFlag.MODIFIED_TIME: modified_time,
        ColumnFlag.MAC: mac,
        ColumnFlag.GROUP_AND_OWNER: group_and_owner,
    }
    flags = {flag for flag, enabled in requested.items() if enabled} | set(config.columns)

    print_listing(entries, build_columns(flags, IdNameResolver()))


if __name__ == "__main__":
    app()
