from .metrics_collector import PodMetricsCollector
from .node_collector import NodeCollector
from .pod_collector import PodCollector

__all__ = [
    "NodeCollector",
    "PodCollector",
    "PodMetricsCollector",
]
