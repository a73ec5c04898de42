"""CLI package for logsweep.

This package contains the Typer application and the report display.
"""

from logsweep.cli.main import app

__all__ = ["app"]
