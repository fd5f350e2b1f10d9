"""Unit tests for core models."""

import pytest

from kubedash.core.models import (
    ActiveBlock,
    ActiveContext,
    AppState,
    Empty,
    KubeNamespace,
    Populated,
    StateFileError,
    resolve_panel_state,
)


class TestAppState:
    """Test AppState snapshots."""

    def test_defaults(self):
        """A fresh state shows the info bar and hides the filter."""
        state = AppState()

        assert state.toggles.show_info_bar is True
        assert state.toggles.show_filter is False
        assert state.data.active_context is None
        assert state.data.node_metrics == ()
        assert len(state.data.namespaces) == 0

    def test_from_dict(self):
        """A full mapping is turned into nested snapshot objects."""
        state = AppState.from_dict(
            {
                "toggles": {"show_info_bar": False, "show_filter": True},
                "context": {"name": "prod", "cluster": "prod-eu", "user": "admin"},
                "node_metrics": [{"name": "n1", "cpu_percent": 12.5, "mem_percent": 40}],
                "namespaces": {
                    "items": [{"name": "default", "status": "Active"}],
                    "selected_index": 0,
                    "selected": "default",
                },
                "clis": [{"name": "helm", "version": "v3.15.1", "status": True}],
                "filter": "web",
                "active_block": "filter",
                "selected_tab": 3,
            }
        )

        assert state.toggles.show_info_bar is False
        assert state.toggles.show_filter is True
        assert state.data.active_context == ActiveContext(name="prod", cluster="prod-eu", user="admin")
        assert state.data.node_metrics[0].mem_percent == 40.0
        assert state.data.namespaces.items == (KubeNamespace("default", "Active"),)
        assert state.data.namespaces.selected_index == 0
        assert state.data.selected_namespace == "default"
        assert state.data.clis[0].status is True
        assert state.data.filter == "web"
        assert state.active_block is ActiveBlock.FILTER
        assert state.selected_tab == 3
        assert state.is_loading is False

    def test_from_empty_dict_is_loading(self):
        """No data yet means the dashboard is still loading."""
        state = AppState.from_dict(None, light_theme=True)

        assert state.is_loading is True
        assert state.light_theme is True

    def test_snapshot_is_immutable(self):
        """Renderers cannot write into the snapshot."""
        state = AppState()

        with pytest.raises(AttributeError):
            state.is_loading = True  # type: ignore[misc]

    @pytest.mark.parametrize(
        "raw",
        [
            {"active_block": "nowhere"},
            {"context": {"name": "only-name"}},
            {"namespaces": {"items": [{"status": "Active"}]}},
            {"node_metrics": [{"cpu_percent": "lots"}]},
            {"namespaces": {"items": [{"name": "default"}], "selected_index": "first"}},
        ],
    )
    def test_invalid_snapshot(self, raw):
        """Malformed snapshots raise StateFileError."""
        with pytest.raises(StateFileError):
            AppState.from_dict(raw)

    @pytest.mark.parametrize("selected_index", ["1", 1.0, 1])
    def test_selected_index_is_coerced(self, selected_index):
        """Numeric cursor values from YAML become integers."""
        state = AppState.from_dict(
            {"namespaces": {"items": [{"name": "a"}, {"name": "b"}], "selected_index": selected_index}}
        )

        assert state.data.namespaces.selected_index == 1
        assert type(state.data.namespaces.selected_index) is int

    def test_non_mapping_snapshot(self):
        """A YAML list is not a snapshot."""
        with pytest.raises(StateFileError):
            AppState.from_dict(["not", "a", "mapping"])  # type: ignore[arg-type]


class TestPanelState:
    """Test populated/empty resolution."""

    def test_populated(self):
        """Any item makes the panel populated."""
        assert resolve_panel_state(["a"], is_loading=True) == Populated(("a",))

    @pytest.mark.parametrize("is_loading", [True, False])
    def test_empty(self, is_loading):
        """No items gives an empty state carrying the loading flag."""
        assert resolve_panel_state([], is_loading=is_loading) == Empty(is_loading=is_loading)
