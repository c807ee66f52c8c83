# src/kubecapacity/core/processor.py
import asyncio
import logging
from typing import Dict, List

from ..collectors.metrics_collector import PodMetricsCollector
from ..collectors.node_collector import NodeCollector
from ..collectors.pod_collector import PodCollector
from ..models.capacity import DEFAULT_ORPHAN_POLICY, ClusterMetric, OrphanPolicy
from ..models.cli import FilterOptions
from ..models.node import NodeInfo
from ..models.pod import PodInfo, PodUsage
from .aggregator import build_cluster_metric

logger = logging.getLogger(__name__)


class CapacityProcessor:
    """Orchestrates collection of one cluster snapshot and its aggregation."""

    def __init__(
        self,
        node_collector: NodeCollector,
        pod_collector: PodCollector,
        metrics_collector: PodMetricsCollector,
        orphan_policy: OrphanPolicy = DEFAULT_ORPHAN_POLICY,
    ):
        self.node_collector = node_collector
        self.pod_collector = pod_collector
        self.metrics_collector = metrics_collector
        self.orphan_policy = orphan_policy

    async def _collect_usage(self, filters: FilterOptions, include_utilization: bool) -> Dict[str, PodUsage]:
        if not include_utilization:
            return {}
        return await self.metrics_collector.collect(namespace=filters.namespace, label_selector=filters.pod_labels)

    async def _filter_pods(self, pods: List[PodInfo], nodes: List[NodeInfo], filters: FilterOptions) -> List[PodInfo]:
        """Drops pods excluded by namespace or node label selectors."""
        if filters.namespace_labels:
            namespaces = await self.pod_collector.collect_namespaces(filters.namespace_labels)
            pods = [pod for pod in pods if pod.namespace in namespaces]

        if filters.node_labels:
            # Pods on nodes outside the selection are out of scope, not orphans.
            node_names = {node.name for node in nodes}
            pods = [pod for pod in pods if pod.node_name in node_names]

        return pods

    async def run(self, filters: FilterOptions, include_utilization: bool = False) -> ClusterMetric:
        """
        Collects nodes, pods and (optionally) pod usage, then aggregates them.

        Collection failures propagate before any aggregation takes place.
        """
        logger.info("Collecting cluster inventory...")

        nodes, pods, usages = await asyncio.gather(
            self.node_collector.collect(label_selector=filters.node_labels),
            self.pod_collector.collect(namespace=filters.namespace, label_selector=filters.pod_labels),
            self._collect_usage(filters, include_utilization),
        )
        pods = await self._filter_pods(pods, nodes, filters)

        logger.info(
            "Collected %d nodes, %d pods and usage for %d pods.",
            len(nodes),
            len(pods),
            len(usages),
        )
        return build_cluster_metric(nodes, pods, usages, orphan_policy=self.orphan_policy)

    async def close(self):
        for collector in (self.node_collector, self.pod_collector, self.metrics_collector):
            await collector.close()
