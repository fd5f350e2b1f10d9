"""Namespaces panel of the status bar."""

import logging
from typing import NamedTuple

from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.measure import Measurement
from rich.style import Style
from rich.table import Table
from rich.text import Text

from kubedash.core.models import ActiveBlock, AppState, Empty, NamespaceList, resolve_panel_state
from kubedash.tui.keybindings import DEFAULT_KEYBINDINGS, KeyBindings
from kubedash.tui.theme import SemanticStyle, get_style
from kubedash.tui.widgets import PlaceholderRenderer, layout_block_default, render_loading

logger = logging.getLogger(__name__)

HIGHLIGHT = "=> "
NAME_WIDTH = 22
STATUS_WIDTH = 6


class NamespaceRow(NamedTuple):
    name: str
    status: str
    style: Style


class NamespaceTable:
    """Namespace rows windowed to the height they are given.

    The window always contains the row under the list cursor, and the cursor
    itself is only read.
    """

    def __init__(self, rows: list[NamespaceRow], selected_index: int | None, header_style: Style | str = "") -> None:
        self.rows = rows
        self.selected_index = selected_index
        self.header_style = header_style

    def window(self, height: int | None) -> range:
        """Indexes of the rows that fit in ``height`` lines, header included."""
        if height is None:
            return range(len(self.rows))

        visible = max(1, height - 1)
        start = 0
        if self.selected_index is not None and self.selected_index >= visible:
            start = max(0, min(self.selected_index, len(self.rows) - 1) - visible + 1)
        return range(start, min(len(self.rows), start + visible))

    def table(self, height: int | None = None) -> Table:
        table = Table(
            box=None,
            expand=True,
            pad_edge=False,
            show_edge=False,
            header_style=self.header_style,
        )
        table.add_column("Name", width=NAME_WIDTH, no_wrap=True, overflow="ellipsis")
        table.add_column("Status", width=STATUS_WIDTH, no_wrap=True, overflow="ellipsis")

        for index in self.window(height):
            row = self.rows[index]
            symbol = HIGHLIGHT if index == self.selected_index else " " * len(HIGHLIGHT)
            table.add_row(Text(f"{symbol}{row.name}"), Text(row.status), style=row.style)
        return table

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield self.table(options.height)

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        return Measurement.get(console, options, self.table())


class NamespacesPanel:
    """Namespace list with the currently selected namespace emphasised."""

    @staticmethod
    def row_styles(namespaces: NamespaceList, selected_namespace: str | None) -> list[SemanticStyle]:
        """Style of each row: secondary for the selected namespace, primary otherwise."""
        return [
            SemanticStyle.SECONDARY if ns.name == selected_namespace else SemanticStyle.PRIMARY
            for ns in namespaces.items
        ]

    @staticmethod
    def render(
        state: AppState,
        keybindings: KeyBindings = DEFAULT_KEYBINDINGS,
        placeholder: PlaceholderRenderer = render_loading,
    ) -> RenderableType:
        """Render the namespace table, or a placeholder when there are no namespaces."""
        light = state.light_theme
        title = (
            f" Namespaces {keybindings.jump_to_namespace.key} (all: {keybindings.select_all_namespace.key}) "
        )
        block = layout_block_default(title)
        if state.active_block is ActiveBlock.NAMESPACES:
            block = block.with_border_style(get_style(SemanticStyle.SECONDARY, light))

        namespaces = state.data.namespaces
        panel_state = resolve_panel_state(namespaces.items, state.is_loading)
        if isinstance(panel_state, Empty):
            logger.debug("Namespaces panel empty (loading=%s)", panel_state.is_loading)
            return placeholder(block, panel_state.is_loading, light)

        rows = []
        styles = NamespacesPanel.row_styles(namespaces, state.data.selected_namespace)
        for index, (ns, semantic) in enumerate(zip(panel_state.items, styles)):
            style = get_style(semantic, light)
            if index == namespaces.selected_index:
                style = style + get_style(SemanticStyle.HIGHLIGHT, light)
            rows.append(NamespaceRow(ns.name, ns.status, style))

        table = NamespaceTable(rows, namespaces.selected_index, get_style(SemanticStyle.HEADER, light))
        return block.wrap(table)
