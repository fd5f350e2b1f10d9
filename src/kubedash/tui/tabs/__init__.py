"""TUI tab components."""

from .overview import OverviewFrame, OverviewTab, ResourceTabsRenderer
from .resources import RESOURCE_TABS, ResourcesTab

__all__ = ["RESOURCE_TABS", "OverviewFrame", "OverviewTab", "ResourceTabsRenderer", "ResourcesTab"]
