"""Listing defaults configuration.

Users can set default flags in the [defaults] table of
~/.config/tabls/config.toml, for example:

    [defaults]
    all = true
    sort = "file-type"
    columns = ["size", "permission"]

Command-line flags are applied on top of these defaults.
"""

import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tabls.core.paths import get_config_path
from tabls.listing.models import ColumnFlag, SortField


class ListingConfig(BaseModel):
    """Default listing options.

    Attributes:
        all: Show hidden entries.
        dirs: Show directories only.
        reverse: Reverse the sort order.
        git_ignore: Exclude a literal .gitignore entry.
        sort: Default sort field.
        columns: Optional column groups shown by default.
    """

    model_config = ConfigDict(extra="forbid")

    all: bool = False
    dirs: bool = False
    reverse: bool = False
    git_ignore: bool = False
    sort: Annotated[SortField, Field(description="Default sort field")] = SortField.NAME
    columns: Annotated[
        list[ColumnFlag],
        Field(default_factory=list, description="Column groups shown by default"),
    ]


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> ListingConfig:
    """Load listing defaults from a TOML file.

    A missing file is not an error; the built-in defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ListingConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return ListingConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    defaults = data.get("defaults", {})
    if not isinstance(defaults, dict):
        raise ConfigError(f"'defaults' in {config_path} must be a table")

    try:
        return ListingConfig.model_validate(defaults)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_path}: {e}") from e
