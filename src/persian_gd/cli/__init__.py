"""Command line interface for persian-gd."""

from persian_gd.cli.main import main

__all__ = ["main"]
