"""Application state snapshot consumed by the overview renderers."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class StateFileError(ValueError):
    """Raised when a state snapshot cannot be turned into an AppState."""


class ActiveBlock(Enum):
    """Panel that currently has keyboard focus."""

    HELP = "help"
    NAMESPACES = "namespaces"
    CONTEXTS = "contexts"
    FILTER = "filter"
    PODS = "pods"
    CONTAINERS = "containers"
    LOGS = "logs"
    SERVICES = "services"
    NODES = "nodes"
    DEPLOYMENTS = "deployments"
    CONFIG_MAPS = "configmaps"
    STATEFUL_SETS = "statefulsets"
    REPLICA_SETS = "replicasets"
    JOBS = "jobs"
    CRON_JOBS = "cronjobs"
    SECRETS = "secrets"
    DESCRIBE = "describe"
    YAML = "yaml"
    UTILIZATION = "utilization"
    MORE = "more"


@dataclass(frozen=True)
class UiToggles:
    """Optional regions of the overview screen."""

    show_info_bar: bool = True
    show_filter: bool = False


@dataclass(frozen=True)
class ActiveContext:
    """The kubeconfig context the dashboard is pointed at."""

    name: str
    cluster: str
    user: str


@dataclass(frozen=True)
class NodeMetrics:
    """Resource usage sample for one node, in percent of allocatable."""

    name: str = ""
    cpu_percent: float = 0.0
    mem_percent: float = 0.0


@dataclass(frozen=True)
class KubeNamespace:
    """Namespace row as shown in the status bar."""

    name: str
    status: str


@dataclass(frozen=True)
class NamespaceList:
    """Namespace items plus the list cursor."""

    items: tuple[KubeNamespace, ...] = ()
    selected_index: int | None = None

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class CliTool:
    """Version information for a CLI tool found on the PATH."""

    name: str
    version: str
    status: bool = False


@dataclass(frozen=True)
class ClusterData:
    """Data fetched from the cluster and the local machine."""

    active_context: ActiveContext | None = None
    node_metrics: tuple[NodeMetrics, ...] = ()
    namespaces: NamespaceList = field(default_factory=NamespaceList)
    selected_namespace: str | None = None
    clis: tuple[CliTool, ...] = ()
    filter: str = ""


@dataclass(frozen=True)
class AppState:
    """Read-only snapshot of everything a render pass needs."""

    toggles: UiToggles = field(default_factory=UiToggles)
    data: ClusterData = field(default_factory=ClusterData)
    active_block: ActiveBlock = ActiveBlock.PODS
    is_loading: bool = False
    enhanced_graphics: bool = True
    light_theme: bool = False
    selected_tab: int = 0

    @classmethod
    def from_dict(
        cls,
        raw: dict[str, Any] | None,
        *,
        enhanced_graphics: bool = True,
        light_theme: bool = False,
    ) -> "AppState":
        """Build a snapshot from a plain mapping (as loaded from YAML).

        An empty or missing mapping yields a state that is still loading.
        """
        if not raw:
            return cls(is_loading=True, enhanced_graphics=enhanced_graphics, light_theme=light_theme)
        if not isinstance(raw, dict):
            raise StateFileError(f"State snapshot must be a mapping, got {type(raw).__name__}")

        try:
            toggles_raw = raw.get("toggles") or {}
            toggles = UiToggles(
                show_info_bar=bool(toggles_raw.get("show_info_bar", True)),
                show_filter=bool(toggles_raw.get("show_filter", False)),
            )

            context_raw = raw.get("context")
            active_context = None
            if context_raw:
                active_context = ActiveContext(
                    name=str(context_raw["name"]),
                    cluster=str(context_raw["cluster"]),
                    user=str(context_raw["user"]),
                )

            node_metrics = tuple(
                NodeMetrics(
                    name=str(nm.get("name", "")),
                    cpu_percent=float(nm.get("cpu_percent", 0.0)),
                    mem_percent=float(nm.get("mem_percent", 0.0)),
                )
                for nm in raw.get("node_metrics") or []
            )

            namespaces_raw = raw.get("namespaces") or {}
            selected_index = namespaces_raw.get("selected_index")
            namespaces = NamespaceList(
                items=tuple(
                    KubeNamespace(name=str(ns["name"]), status=str(ns.get("status", "")))
                    for ns in namespaces_raw.get("items") or []
                ),
                selected_index=None if selected_index is None else int(selected_index),
            )

            clis = tuple(
                CliTool(name=str(c["name"]), version=str(c.get("version", "")), status=bool(c.get("status", False)))
                for c in raw.get("clis") or []
            )

            data = ClusterData(
                active_context=active_context,
                node_metrics=node_metrics,
                namespaces=namespaces,
                selected_namespace=namespaces_raw.get("selected"),
                clis=clis,
                filter=str(raw.get("filter") or ""),
            )

            return cls(
                toggles=toggles,
                data=data,
                active_block=ActiveBlock(raw.get("active_block", ActiveBlock.PODS.value)),
                is_loading=bool(raw.get("is_loading", False)),
                enhanced_graphics=bool(raw.get("enhanced_graphics", enhanced_graphics)),
                light_theme=bool(raw.get("light_theme", light_theme)),
                selected_tab=int(raw.get("selected_tab", 0)),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise StateFileError(f"Invalid state snapshot: {e}") from e
