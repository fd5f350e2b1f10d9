"""kubedash - Terminal dashboard for Kubernetes clusters."""

from kubedash._version import __version__
from kubedash.cli import cli
from kubedash.tui import run as run_tui

__all__ = ["__version__", "cli", "run_tui"]
