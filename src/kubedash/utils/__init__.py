"""Utility functions."""

from kubedash.utils.config import ConfigError, DashboardConfig, LayoutConfig, load_config
from kubedash.utils.logging import setup_logging

__all__ = ["ConfigError", "DashboardConfig", "LayoutConfig", "load_config", "setup_logging"]
