"""Core domain models for kubedash."""

from kubedash.core.models.panel import Empty, PanelState, Populated, resolve_panel_state
from kubedash.core.models.state import (
    ActiveBlock,
    ActiveContext,
    AppState,
    CliTool,
    ClusterData,
    KubeNamespace,
    NamespaceList,
    NodeMetrics,
    StateFileError,
    UiToggles,
)

__all__ = [
    "ActiveBlock",
    "ActiveContext",
    "AppState",
    "CliTool",
    "ClusterData",
    "Empty",
    "KubeNamespace",
    "NamespaceList",
    "NodeMetrics",
    "PanelState",
    "Populated",
    "StateFileError",
    "UiToggles",
    "resolve_panel_state",
]
