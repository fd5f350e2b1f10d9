"""Overview panels."""

from kubedash.tui.panels.cli_info import CliInfoPanel
from kubedash.tui.panels.context_info import ContextInfoPanel
from kubedash.tui.panels.filter import FilterPanel, FilterRender
from kubedash.tui.panels.logo import BANNER, LogoPanel
from kubedash.tui.panels.namespaces import NamespacesPanel

__all__ = [
    "BANNER",
    "CliInfoPanel",
    "ContextInfoPanel",
    "FilterPanel",
    "FilterRender",
    "LogoPanel",
    "NamespacesPanel",
]
