"""Terminal user interface for kubedash."""

from kubedash.tui.app import KubedashApp, run

__all__ = ["KubedashApp", "run"]
