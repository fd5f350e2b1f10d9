"""Placeholder drawn in place of an empty table."""

from collections.abc import Callable

from rich.console import RenderableType
from rich.text import Text

from kubedash.tui.theme import SemanticStyle, get_style
from kubedash.tui.widgets.block import Block

LOADING_TEXT = "\n\n Loading ...\n\n"

PlaceholderRenderer = Callable[[Block, bool, bool], RenderableType]


def render_loading(block: Block, is_loading: bool, light_theme: bool) -> RenderableType:
    """Spinner text while data is on its way, the bare block once it is known to be empty."""
    if is_loading:
        style = get_style(SemanticStyle.SECONDARY, light_theme)
        return block.wrap(Text(LOADING_TEXT, style=style), style=style)
    return block.wrap(Text(""))
