"""TUI widgets."""

from kubedash.tui.widgets.block import Block, layout_block_default
from kubedash.tui.widgets.line_gauge import LineGauge, get_gauge_line
from kubedash.tui.widgets.placeholder import PlaceholderRenderer, render_loading
from kubedash.tui.widgets.status_bar import StatusBar

__all__ = [
    "Block",
    "LineGauge",
    "PlaceholderRenderer",
    "StatusBar",
    "get_gauge_line",
    "layout_block_default",
    "render_loading",
]
