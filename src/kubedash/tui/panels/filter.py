"""Filter input panel."""

from typing import NamedTuple

from rich.console import RenderableType
from rich.text import Text

from kubedash.core.models import ActiveBlock, AppState
from kubedash.tui.keybindings import DEFAULT_KEYBINDINGS, KeyBindings
from kubedash.tui.layout import CursorPosition
from kubedash.tui.theme import SemanticStyle, get_style
from kubedash.tui.widgets import layout_block_default

# Border plus one cell of padding
TEXT_OFFSET_X = 2
TEXT_OFFSET_Y = 1


class FilterRender(NamedTuple):
    renderable: RenderableType
    cursor: CursorPosition | None


class FilterPanel:
    """Current filter text; while focused it also reports where the cursor goes."""

    @staticmethod
    def title(keybindings: KeyBindings) -> str:
        return f" Filter {keybindings.jump_to_filter.key} (toggle: {keybindings.toggle_filter.key}) "

    @staticmethod
    def render(state: AppState, keybindings: KeyBindings = DEFAULT_KEYBINDINGS) -> FilterRender:
        """Render the filter box.

        The cursor is relative to the panel's top-left corner and trails the typed
        text. It is only returned when the filter block has focus.
        """
        block = layout_block_default(FilterPanel.title(keybindings))
        text = Text(state.data.filter, no_wrap=True, overflow="crop")

        if state.active_block is not ActiveBlock.FILTER:
            return FilterRender(block.wrap(text), None)

        secondary = get_style(SemanticStyle.SECONDARY, state.light_theme)
        block = block.with_border_style(secondary)
        # Rich renderables cannot move the terminal cursor, so draw a block cursor in its cell
        text.append(" ", style=get_style(SemanticStyle.HIGHLIGHT, state.light_theme))
        cursor = CursorPosition(TEXT_OFFSET_X + len(state.data.filter), TEXT_OFFSET_Y)
        return FilterRender(block.wrap(text, style=secondary), cursor)
