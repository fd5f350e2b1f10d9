"""Unit tests for the overview composition."""

from dataclasses import replace

import pytest
from rich.layout import Layout
from rich.text import Text

from kubedash.core.models import ActiveBlock, AppState, KubeNamespace, NamespaceList, UiToggles
from kubedash.tui.keybindings import DEFAULT_KEYBINDINGS
from kubedash.tui.layout import CLI_INFO, CONTEXT_INFO, FILTER, LOGO, NAMESPACES, RESOURCE_TABS, STATUS, CursorPosition
from kubedash.tui.tabs import OverviewTab, ResourcesTab
from kubedash.utils.config import LayoutConfig


def _toggled(state: AppState, show_info_bar: bool, show_filter: bool) -> AppState:
    return replace(state, toggles=UiToggles(show_info_bar=show_info_bar, show_filter=show_filter))


class TestOverviewTab:
    """Test the top-level overview renderer."""

    @pytest.mark.parametrize("show_info_bar", [True, False])
    @pytest.mark.parametrize("show_filter", [True, False])
    def test_regions_follow_toggles(self, state, show_info_bar, show_filter):
        """Every toggle combination yields the matching regions."""
        frame = OverviewTab.render(_toggled(state, show_info_bar, show_filter))
        names = [r.name for r in frame.regions]

        assert len(names) == 1 + int(show_info_bar) + int(show_filter)
        assert names[-1] == RESOURCE_TABS
        assert (frame.renderable.get(STATUS) is not None) is show_info_bar
        assert (frame.renderable.get(FILTER) is not None) is show_filter

    def test_status_columns(self, state):
        """The status bar is split into its four panels."""
        frame = OverviewTab.render(state)
        status = frame.renderable[STATUS]

        assert [child.name for child in status.children] == [NAMESPACES, CONTEXT_INFO, CLI_INFO, LOGO]

    def test_no_status_panels_without_info_bar(self, state):
        """Hiding the info bar removes all status panels."""
        frame = OverviewTab.render(_toggled(state, False, True))

        assert frame.renderable.get(NAMESPACES) is None

    def test_cursor_below_status_bar(self, state):
        """The filter cursor is shifted down by the status bar height."""
        frame = OverviewTab.render(replace(state, active_block=ActiveBlock.FILTER))

        assert frame.cursor == CursorPosition(2 + len("nginx"), 1 + 9)

    def test_cursor_without_status_bar(self, state):
        """Without the status bar the filter is the first region."""
        frame = OverviewTab.render(replace(_toggled(state, False, True), active_block=ActiveBlock.FILTER))

        assert frame.cursor == CursorPosition(2 + len("nginx"), 1)

    def test_cursor_with_custom_heights(self, state):
        """The cursor follows the configured status bar height."""
        frame = OverviewTab.render(
            replace(state, active_block=ActiveBlock.FILTER),
            layout_config=LayoutConfig(status_bar_height=12),
        )

        assert frame.cursor == CursorPosition(7, 13)

    def test_no_cursor_when_filter_hidden(self, state):
        """A focused but hidden filter places no cursor."""
        frame = OverviewTab.render(replace(_toggled(state, True, False), active_block=ActiveBlock.FILTER))

        assert frame.cursor is None

    def test_no_cursor_when_unfocused(self, state):
        """A visible but unfocused filter places no cursor."""
        assert OverviewTab.render(state).cursor is None

    def test_resource_tabs_renderer(self, state):
        """The resource region is delegated to the given renderer."""
        seen = []

        def resource_tabs(snapshot):
            seen.append(snapshot)
            return Text("resource view")

        frame = OverviewTab.render(state, resource_tabs=resource_tabs)

        assert seen == [state]
        assert frame.renderable[RESOURCE_TABS].renderable.plain == "resource view"

    def test_placeholder_passed_to_list_panels(self, state):
        """Empty namespace and CLI lists both use the injected placeholder."""
        titles = []

        def placeholder(block, is_loading, light_theme):
            titles.append(block.title.strip())
            return Text("")

        empty = replace(state, data=replace(state.data, namespaces=NamespaceList(), clis=()))
        OverviewTab.render(empty, DEFAULT_KEYBINDINGS, placeholder=placeholder)

        assert titles == ["Namespaces n (all: a)", "CLI Info"]

    def test_rendered_frame(self, state, render_text):
        """A full frame shows every panel."""
        output = render_text(OverviewTab.render(state).renderable, width=140, height=30)

        for expected in ("Namespaces", "Context: kind-dev", "CPU:", "70%", "CLI Info", "Filter", "Pods <1>"):
            assert expected in output
        assert len(output.rstrip("\n").splitlines()) == 30

    def test_rendered_frame_minimal(self, state, render_text):
        """With both bars hidden only the resource tabs are drawn."""
        output = render_text(OverviewTab.render(_toggled(state, False, False)).renderable, width=100, height=20)

        assert "Pods <1>" in output
        assert "Namespaces" not in output
        assert "Filter" not in output

    def test_namespace_cursor_visible_in_long_list(self, state, render_text):
        """The status bar scrolls the namespace list so the cursor row is drawn."""
        namespaces = NamespaceList(
            items=tuple(KubeNamespace(f"ns-{i:02d}", "Active") for i in range(12)),
            selected_index=10,
        )
        long_list = replace(state, data=replace(state.data, namespaces=namespaces))

        output = render_text(OverviewTab.render(long_list).renderable, width=140, height=30)

        assert "=> ns-10" in output
        assert "ns-05" in output
        assert "ns-04" not in output
        assert long_list.data.namespaces.selected_index == 10

    def test_render_status_standalone(self, state):
        """The status composer can build its own layout."""
        layout = OverviewTab.render_status(state)

        assert isinstance(layout, Layout)
        assert layout.name == STATUS
        assert layout[LOGO] is not None


class TestResourcesTab:
    """Test the default resource tabs renderer."""

    def test_selected_tab(self, state, render_text):
        """The selected tab is named in the body."""
        output = render_text(ResourcesTab.render(replace(state, selected_tab=2)), width=200)

        assert "Nodes of the selected namespace" in output

    def test_selected_tab_wraps(self, state):
        """Out of range tab indexes wrap around."""
        strip = ResourcesTab.tab_strip(replace(state, selected_tab=10))

        first = strip.spans[0]
        assert strip.plain[first.start : first.end] == "Pods <1>"
        assert first.style.bold is True
