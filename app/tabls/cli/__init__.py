"""CLI package for tabls.

This package contains the Typer application and its table renderer.
"""

from tabls.cli.main import app

__all__ = ["app"]
