"""Resources tab component."""

from rich.console import Group, RenderableType
from rich.style import Style
from rich.text import Text

from kubedash.core.models import AppState
from kubedash.tui.theme import SemanticStyle, get_style
from kubedash.tui.widgets import layout_block_default

RESOURCE_TABS = [
    "Pods <1>",
    "Services <2>",
    "Nodes <3>",
    "ConfigMaps <4>",
    "StatefulSets <5>",
    "ReplicaSets <6>",
    "Deployments <7>",
    "Jobs <8>",
    "DaemonSets <9>",
    "More <0>",
]


class ResourcesTab:
    """Default resource tabs: the tab strip with the selected tab emphasised."""

    @staticmethod
    def tab_strip(state: AppState) -> Text:
        light = state.light_theme
        selected = state.selected_tab % len(RESOURCE_TABS)

        strip = Text(no_wrap=True, overflow="ellipsis")
        for index, title in enumerate(RESOURCE_TABS):
            if index:
                strip.append(" │ ", style="dim")
            if index == selected:
                strip.append(title, style=get_style(SemanticStyle.SECONDARY, light) + Style(bold=True))
            else:
                strip.append(title, style=get_style(SemanticStyle.DEFAULT, light))
        return strip

    @staticmethod
    def render(state: AppState) -> RenderableType:
        """Render the tab strip above the body of the selected resource."""
        selected = RESOURCE_TABS[state.selected_tab % len(RESOURCE_TABS)]
        body = Text(f"\n{selected.split(' <')[0]} of the selected namespace are listed here", style="dim")
        return layout_block_default(" Resources ").wrap(Group(ResourcesTab.tab_strip(state), body))
