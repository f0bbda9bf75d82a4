"""tabls - a directory listing tool with colorized, column-configurable tables."""

__version__ = "0.1.0"
