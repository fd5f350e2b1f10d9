"""Overview tab component.

Composes the status bar, the optional filter bar and the resource tabs into
one Rich layout. Everything is recomputed from the state snapshot on each tick.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from rich.console import RenderableType
from rich.layout import Layout

from kubedash.core.models import AppState
from kubedash.tui.keybindings import DEFAULT_KEYBINDINGS, KeyBindings
from kubedash.tui.layout import (
    CLI_INFO,
    CONTEXT_INFO,
    FILTER,
    LOGO,
    NAMESPACES,
    RESOURCE_TABS,
    STATUS,
    CursorPosition,
    Region,
    horizontal_layout,
    plan_overview,
    plan_status,
    region_offset,
    vertical_layout,
)
from kubedash.tui.panels import CliInfoPanel, ContextInfoPanel, FilterPanel, LogoPanel, NamespacesPanel
from kubedash.tui.tabs.resources import ResourcesTab
from kubedash.tui.widgets import PlaceholderRenderer, render_loading
from kubedash.utils.config import LayoutConfig

logger = logging.getLogger(__name__)

ResourceTabsRenderer = Callable[[AppState], RenderableType]


@dataclass(frozen=True)
class OverviewFrame:
    """Result of one render pass.

    ``cursor`` is relative to the overview's top-left corner and is set only
    while the filter has focus.
    """

    renderable: Layout
    regions: tuple[Region, ...]
    cursor: CursorPosition | None = None


class OverviewTab:
    """Overview tab logic."""

    @staticmethod
    def render(
        state: AppState,
        keybindings: KeyBindings = DEFAULT_KEYBINDINGS,
        layout_config: LayoutConfig | None = None,
        resource_tabs: ResourceTabsRenderer = ResourcesTab.render,
        placeholder: PlaceholderRenderer = render_loading,
    ) -> OverviewFrame:
        """Render the whole overview screen."""
        layout_config = layout_config or LayoutConfig()
        regions = plan_overview(state.toggles, layout_config)
        layout = vertical_layout(regions)
        cursor = None

        if state.toggles.show_info_bar:
            OverviewTab.render_status(state, keybindings, layout_config, placeholder, layout=layout[STATUS])

        if state.toggles.show_filter:
            filter_render = FilterPanel.render(state, keybindings)
            layout[FILTER].update(filter_render.renderable)
            if filter_render.cursor is not None:
                cursor = filter_render.cursor.offset(dy=region_offset(regions, FILTER))
                logger.debug("Filter cursor at %s", cursor)

        layout[RESOURCE_TABS].update(resource_tabs(state))
        return OverviewFrame(renderable=layout, regions=tuple(regions), cursor=cursor)

    @staticmethod
    def render_status(
        state: AppState,
        keybindings: KeyBindings = DEFAULT_KEYBINDINGS,
        layout_config: LayoutConfig | None = None,
        placeholder: PlaceholderRenderer = render_loading,
        layout: Layout | None = None,
    ) -> Layout:
        """Namespaces, context info, CLI info and logo, left to right.

        Splits ``layout`` in place when given, otherwise a new status layout.
        """
        layout = horizontal_layout(
            plan_status(layout_config or LayoutConfig()),
            layout if layout is not None else Layout(name=STATUS),
        )
        layout[NAMESPACES].update(NamespacesPanel.render(state, keybindings, placeholder))
        layout[CONTEXT_INFO].update(ContextInfoPanel.render(state, keybindings))
        layout[CLI_INFO].update(CliInfoPanel.render(state, placeholder))
        layout[LOGO].update(LogoPanel.render(state))
        return layout
