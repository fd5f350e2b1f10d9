"""Shared fixtures."""

import io

import pytest
from rich.console import Console, RenderableType

from kubedash.core.models import (
    ActiveBlock,
    ActiveContext,
    AppState,
    CliTool,
    ClusterData,
    KubeNamespace,
    NamespaceList,
    NodeMetrics,
    UiToggles,
)


@pytest.fixture
def render_text():
    """Render a Rich renderable to plain text."""

    def _render(renderable: RenderableType, width: int = 60, height: int | None = None) -> str:
        console = Console(file=io.StringIO(), width=width, height=height or 25, record=True, color_system=None)
        console.print(renderable)
        return console.export_text()

    return _render


@pytest.fixture
def cluster_data() -> ClusterData:
    return ClusterData(
        active_context=ActiveContext(name="kind-dev", cluster="kind-dev-cluster", user="kind-dev-admin"),
        node_metrics=(
            NodeMetrics(name="node-a", cpu_percent=80.0, mem_percent=30.0),
            NodeMetrics(name="node-b", cpu_percent=60.0, mem_percent=50.0),
        ),
        namespaces=NamespaceList(
            items=(
                KubeNamespace("default", "Active"),
                KubeNamespace("kube-system", "Active"),
                KubeNamespace("monitoring", "Active"),
            ),
            selected_index=1,
        ),
        selected_namespace="default",
        clis=(
            CliTool("kubectl client", "v1.30.2", True),
            CliTool("docker", "Not found", False),
        ),
        filter="nginx",
    )


@pytest.fixture
def state(cluster_data: ClusterData) -> AppState:
    return AppState(
        toggles=UiToggles(show_info_bar=True, show_filter=True),
        data=cluster_data,
        active_block=ActiveBlock.PODS,
    )
