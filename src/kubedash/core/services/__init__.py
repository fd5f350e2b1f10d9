"""Core services for kubedash."""

from kubedash.core.services.metrics import (
    clamp_ratio,
    cpu_ratio,
    memory_ratio,
    node_metrics_ratio,
    percent_label,
)

__all__ = ["clamp_ratio", "cpu_ratio", "memory_ratio", "node_metrics_ratio", "percent_label"]
