# src/kubecapacity/core/aggregator.py
"""
Builds the cluster -> node -> pod capacity tree from collected inventory.
"""

import logging
from typing import Iterable, Mapping, Optional

from ..models.capacity import DEFAULT_ORPHAN_POLICY, ClusterMetric, NodeMetric, OrphanPolicy
from ..models.node import NodeInfo
from ..models.pod import PodInfo, PodUsage

logger = logging.getLogger(__name__)


def build_cluster_metric(
    nodes: Iterable[NodeInfo],
    pods: Iterable[PodInfo],
    usages: Optional[Mapping[str, PodUsage]] = None,
    orphan_policy: OrphanPolicy = DEFAULT_ORPHAN_POLICY,
) -> ClusterMetric:
    """Aggregate a snapshot of nodes, pods and pod usage into a ClusterMetric.

    Aggregation rules:
    - Every node is registered with its allocatable capacity before any pod
      is attributed, so a pod on a known node always finds it.
    - Each pod adds its request and limit to its node and to the cluster.
    - Each container usage sample adds to the pod, its node and the cluster.
    - Pods on unknown nodes are indexed at cluster scope only; whether their
      figures count toward cluster totals follows `orphan_policy`.
    - Pods without usage data have zero utilization.

    Raises:
        DuplicatePodError: If the same namespace/name appears twice in `pods`.
    """
    usages = usages or {}
    cluster = ClusterMetric(orphan_policy=orphan_policy)

    for node in nodes:
        cluster.add_node_metric(
            NodeMetric.from_allocatable(node.name, cpu=node.allocatable_cpu, memory=node.allocatable_memory)
        )

    for pod in pods:
        usage = usages.get(pod.key)
        cluster.add_pod_metric(pod, usage.containers if usage else ())

    orphans = len(cluster.orphan_pods)
    if orphans:
        logger.info("%d pod(s) are not scheduled on a known node.", orphans)

    logger.debug(
        "Aggregated %d nodes and %d pods (cpu request=%sm, memory request=%s bytes).",
        len(cluster.node_metrics),
        len(cluster.pod_metrics),
        cluster.cpu.request,
        cluster.memory.request,
    )
    return cluster
