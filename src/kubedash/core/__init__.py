"""Core domain models and services for kubedash."""

from kubedash.core.models import AppState, NodeMetrics
from kubedash.core.services import cpu_ratio, memory_ratio, node_metrics_ratio

__all__ = ["AppState", "NodeMetrics", "cpu_ratio", "memory_ratio", "node_metrics_ratio"]
