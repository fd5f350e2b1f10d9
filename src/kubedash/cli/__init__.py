"""Command line interface for kubedash."""

from kubedash.cli.main import cli

__all__ = ["cli"]
