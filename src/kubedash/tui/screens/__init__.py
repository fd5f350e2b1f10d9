"""TUI screens."""

from .main import OverviewScreen, StateProvider

__all__ = ["OverviewScreen", "StateProvider"]
