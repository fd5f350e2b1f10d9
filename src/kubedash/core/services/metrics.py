"""Node metric aggregation for the resource gauges."""

from collections.abc import Callable, Sequence

from kubedash.core.models import NodeMetrics

MetricSelector = Callable[[NodeMetrics], float]


def node_metrics_ratio(node_metrics: Sequence[NodeMetrics], selector: MetricSelector) -> float:
    """Convert per-node percentages into the 0..1 fraction a gauge understands.

    Returns the mean of the selected field divided by 100, or 0.0 when there are
    no samples. The result is not clamped and exceeds 1.0 for overcommitted nodes.
    """
    if not node_metrics:
        return 0.0
    total = sum(selector(nm) for nm in node_metrics)
    return (total / len(node_metrics)) / 100.0


def cpu_ratio(node_metrics: Sequence[NodeMetrics]) -> float:
    """Average CPU usage across nodes as a ratio."""
    return node_metrics_ratio(node_metrics, lambda nm: nm.cpu_percent)


def memory_ratio(node_metrics: Sequence[NodeMetrics]) -> float:
    """Average memory usage across nodes as a ratio."""
    return node_metrics_ratio(node_metrics, lambda nm: nm.mem_percent)


def clamp_ratio(ratio: float) -> float:
    """Bound a ratio to [0, 1] before it is drawn."""
    return max(0.0, min(1.0, ratio))


def percent_label(ratio: float) -> str:
    """Integer percentage label, computed from the unclamped ratio."""
    return f"{ratio * 100.0:.0f}%"
