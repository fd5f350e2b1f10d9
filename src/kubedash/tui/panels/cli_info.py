"""CLI tool versions panel."""

from rich.console import RenderableType
from rich.table import Table

from kubedash.core.models import AppState, CliTool, Empty, resolve_panel_state
from kubedash.tui.theme import SemanticStyle, get_style
from kubedash.tui.widgets import PlaceholderRenderer, layout_block_default, render_loading


class CliInfoPanel:
    """Name and version of each CLI tool; tools that failed to report are shown as failures."""

    @staticmethod
    def row_style(cli: CliTool) -> SemanticStyle:
        return SemanticStyle.PRIMARY if cli.status else SemanticStyle.FAILURE

    @staticmethod
    def render(state: AppState, placeholder: PlaceholderRenderer = render_loading) -> RenderableType:
        light = state.light_theme
        block = layout_block_default(" CLI Info ")

        panel_state = resolve_panel_state(state.data.clis, state.is_loading)
        if isinstance(panel_state, Empty):
            return placeholder(block, panel_state.is_loading, light)

        table = Table(box=None, expand=True, pad_edge=False, show_edge=False, show_header=False)
        table.add_column("Name", ratio=1, no_wrap=True, overflow="ellipsis")
        table.add_column("Version", ratio=1, no_wrap=True, overflow="ellipsis")
        for cli in panel_state.items:
            table.add_row(cli.name, cli.version, style=get_style(CliInfoPanel.row_style(cli), light))

        return block.wrap(table)
