"""Listing colors.

The bundled palette lives in data/theme.toml. A theme.toml in the tabls
config directory may override any subset of its keys.
"""

import logging
import sys
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from rich.theme import Theme

from tabls.core.paths import get_theme_path

logger = logging.getLogger(__name__)


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) keyed by Rich style name."""

    model_config = ConfigDict(extra="forbid")

    # Messages and table header
    muted: str = "#7f8c8d"
    warning: str = "#f5b332"
    error: str = "#f53263"

    # One per listing column
    entry_name: str = "#ffffff"
    entry_type: str = "#b2bec3"
    size: str = "#faf870"
    byte_count: str = "#f5b332"
    modified: str = "#e5c07b"
    accessed: str = "#d19a66"
    created: str = "#c678dd"
    permission: str = "#5ff967"
    owner: str = "#0ec1c8"
    group: str = "#0e8ac8"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, value: object, info: Any) -> str:
        if not isinstance(value, str):
            raise ValueError(f"{info.field_name}: color must be a string")
        color = value.strip()
        if not color.startswith("#"):
            raise ValueError(f"{info.field_name}: color must start with '#'")
        digits = color[1:]
        if len(digits) not in (3, 6):
            raise ValueError(f"{info.field_name}: color must be #RGB or #RRGGBB format")
        if any(c not in "0123456789abcdefABCDEF" for c in digits):
            raise ValueError(f"{info.field_name}: invalid hex color '{color}'")
        return color


def get_bundled_theme_path() -> Path:
    """Return the palette shipped inside the package."""
    return Path(str(resources.files("tabls.data").joinpath("theme.toml")))


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Read the [colors] table of a theme file.

    Non-string values are skipped.

    Returns:
        Color names mapped to hex values, or None when the file is absent
        or unusable.
    """
    try:
        with open(path, "rb") as f:
            colors = tomllib.load(f).get("colors", {})
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        logger.warning("Failed to parse theme file %s: %s", path, e)
        print(f"Warning: ignoring theme file {path}: {e}", file=sys.stderr)
        return None
    except OSError as e:
        logger.warning("Failed to read theme file %s: %s", path, e)
        return None

    if not isinstance(colors, dict):
        logger.warning("Ignoring %s: 'colors' is not a table", path)
        return None
    return {key: value for key, value in colors.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Merge the user palette over the bundled one.

    Falls back to the model defaults when the merged colors do not validate.
    """
    colors = _load_toml_colors(get_bundled_theme_path())
    if colors is None:
        logger.error("Bundled theme could not be loaded")
        colors = {}

    user_path = get_theme_path()
    overrides = _load_toml_colors(user_path)
    if overrides:
        logger.debug("Applying theme overrides from %s", user_path)
        colors = {**colors, **overrides}

    try:
        return ThemeColors(**colors)
    except ValueError as e:
        logger.warning("Theme validation failed, using defaults: %s", e)
        print(f"Warning: invalid theme, using defaults: {e}", file=sys.stderr)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme used by both consoles.

    Each color becomes a style of the same name; errors and entry names
    are bold, and table headers use the muted color.
    """
    if colors is None:
        colors = load_theme()

    styles = colors.model_dump()
    styles["error"] = f"bold {colors.error}"
    styles["entry_name"] = f"bold {colors.entry_name}"
    styles["table_header"] = colors.muted
    return Theme(styles)


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Return the Rich theme, building it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
