"""Context summary and cluster resource gauges."""

from rich.console import Group, RenderableType
from rich.text import Text

from kubedash.core.models import AppState
from kubedash.core.services import clamp_ratio, cpu_ratio, memory_ratio, percent_label
from kubedash.tui.keybindings import DEFAULT_KEYBINDINGS, KeyBindings
from kubedash.tui.theme import SemanticStyle, get_style
from kubedash.tui.widgets import LineGauge, get_gauge_line, layout_block_default

CONTEXT_ROWS = 3
CONTEXT_NOT_FOUND = "Context information not found"


class ContextInfoPanel:
    """Active context name, cluster and user, followed by CPU and memory gauges."""

    @staticmethod
    def context_text(state: AppState) -> Text:
        """Three rows of label/value pairs, or a failure message padded to three rows."""
        light = state.light_theme
        default = get_style(SemanticStyle.DEFAULT, light)
        primary = get_style(SemanticStyle.PRIMARY, light)

        context = state.data.active_context
        if context is None:
            lines = [Text(CONTEXT_NOT_FOUND, style=get_style(SemanticStyle.FAILURE, light))]
        else:
            lines = [
                Text.assemble(("Context: ", default), (context.name, primary)),
                Text.assemble(("Cluster: ", default), (context.cluster, primary)),
                Text.assemble(("User: ", default), (context.user, primary)),
            ]
        lines.extend(Text("") for _ in range(CONTEXT_ROWS - len(lines)))
        return Text("\n").join(lines)

    @staticmethod
    def gauge(state: AppState, title: str, ratio: float) -> LineGauge:
        """Bar filled with the clamped ratio, labelled with the raw percentage."""
        return LineGauge(
            ratio=clamp_ratio(ratio),
            label=percent_label(ratio),
            title=title,
            gauge_style=get_style(SemanticStyle.PRIMARY, state.light_theme),
            line=get_gauge_line(state.enhanced_graphics),
        )

    @staticmethod
    def render(state: AppState, keybindings: KeyBindings = DEFAULT_KEYBINDINGS) -> RenderableType:
        block = layout_block_default(f" Context Info (toggle <{keybindings.toggle_info.key}>) ")
        node_metrics = state.data.node_metrics
        return block.wrap(
            Group(
                ContextInfoPanel.context_text(state),
                ContextInfoPanel.gauge(state, "CPU:", cpu_ratio(node_metrics)),
                ContextInfoPanel.gauge(state, "Memory:", memory_ratio(node_metrics)),
            )
        )
