# src/kubecapacity/models/capacity.py
"""
The cluster -> node -> pod capacity hierarchy.

The tree is built in a single pass (nodes first, then pods) and is treated as
read-only by reporters and exporters afterwards. None of the mutating methods
are safe for concurrent use on the same cluster.
"""

import logging
from enum import Enum
from typing import Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.exceptions import DuplicatePodError
from .pod import ContainerUsage, PodInfo, pod_key
from .resource import ResourceMetric, ResourceType

logger = logging.getLogger(__name__)


class OrphanPolicy(str, Enum):
    """
    How pods whose node is not in the inventory count toward cluster totals.

    COUNT_IN_CLUSTER rolls their request, limit and utilization into the
    cluster figures. EXCLUDE_FROM_CLUSTER keeps all three out. In both cases
    the pod stays in the cluster's pod index and is never attributed to a node.
    """

    COUNT_IN_CLUSTER = "count-in-cluster"
    EXCLUDE_FROM_CLUSTER = "exclude-from-cluster"


DEFAULT_ORPHAN_POLICY = OrphanPolicy.COUNT_IN_CLUSTER


def _cpu_metric() -> ResourceMetric:
    return ResourceMetric(resource_type=ResourceType.CPU)


def _memory_metric() -> ResourceMetric:
    return ResourceMetric(resource_type=ResourceType.MEMORY)


class PodMetric(BaseModel):
    """CPU and memory figures for a single pod."""

    model_config = ConfigDict(extra="forbid")

    name: str
    namespace: str
    node_name: Optional[str] = None
    cpu: ResourceMetric = Field(default_factory=_cpu_metric)
    memory: ResourceMetric = Field(default_factory=_memory_metric)

    @property
    def key(self) -> str:
        return pod_key(self.namespace, self.name)


class NodeMetric(BaseModel):
    """
    CPU and memory figures for a node: its allocatable capacity plus the sum
    of the requests, limits and usage of the pods attributed to it.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    cpu: ResourceMetric = Field(default_factory=_cpu_metric)
    memory: ResourceMetric = Field(default_factory=_memory_metric)
    pod_metrics: Dict[str, PodMetric] = Field(default_factory=dict)

    @classmethod
    def from_allocatable(cls, name: str, cpu: int, memory: int) -> "NodeMetric":
        """Creates an empty node seeded with its allocatable capacity."""
        return cls(
            name=name,
            cpu=ResourceMetric(resource_type=ResourceType.CPU, allocatable=cpu),
            memory=ResourceMetric(resource_type=ResourceType.MEMORY, allocatable=memory),
        )


class ClusterMetric(BaseModel):
    """
    Cluster-wide CPU and memory figures, every node by name, and a flat index
    of every pod by `namespace/name`.
    """

    model_config = ConfigDict(extra="forbid")

    cpu: ResourceMetric = Field(default_factory=_cpu_metric)
    memory: ResourceMetric = Field(default_factory=_memory_metric)
    node_metrics: Dict[str, NodeMetric] = Field(default_factory=dict)
    pod_metrics: Dict[str, PodMetric] = Field(default_factory=dict)
    orphan_policy: OrphanPolicy = DEFAULT_ORPHAN_POLICY

    def add_node_metric(self, node: NodeMetric) -> None:
        """
        Registers a node and folds its figures into the cluster totals.

        Registering a node name that is already known does nothing, so a node
        is never counted twice.
        """
        if node.name in self.node_metrics:
            logger.debug("Node '%s' is already registered; skipping.", node.name)
            return

        self.node_metrics[node.name] = node
        self.cpu.add_metric(node.cpu)
        self.memory.add_metric(node.memory)

    def add_pod_metric(self, pod: PodInfo, container_usages: Iterable[ContainerUsage] = ()) -> PodMetric:
        """
        Attributes a pod to the cluster and, when its node is known, to that node.

        Raises:
            DuplicatePodError: If a pod with the same namespace/name was already added.
        """
        key = pod.key
        if key in self.pod_metrics:
            raise DuplicatePodError(key)

        pm = PodMetric(
            name=pod.name,
            namespace=pod.namespace,
            node_name=pod.node_name,
            cpu=ResourceMetric(resource_type=ResourceType.CPU, request=pod.cpu_request, limit=pod.cpu_limit),
            memory=ResourceMetric(
                resource_type=ResourceType.MEMORY, request=pod.memory_request, limit=pod.memory_limit
            ),
        )
        self.pod_metrics[key] = pm

        nm = self.node_metrics.get(pod.node_name) if pod.node_name else None
        counts_in_cluster = nm is not None or self.orphan_policy == OrphanPolicy.COUNT_IN_CLUSTER

        if nm is not None:
            pm.cpu.allocatable = nm.cpu.allocatable
            pm.memory.allocatable = nm.memory.allocatable
            nm.pod_metrics[key] = pm
            nm.cpu.add_allocation(pod.cpu_request, pod.cpu_limit)
            nm.memory.add_allocation(pod.memory_request, pod.memory_limit)
        else:
            logger.debug("Pod '%s' is not on a known node (node=%r).", key, pod.node_name)

        if counts_in_cluster:
            self.cpu.add_allocation(pod.cpu_request, pod.cpu_limit)
            self.memory.add_allocation(pod.memory_request, pod.memory_limit)

        for usage in container_usages:
            pm.cpu.add_usage(usage.cpu)
            pm.memory.add_usage(usage.memory)

            if nm is not None:
                nm.cpu.add_usage(usage.cpu)
                nm.memory.add_usage(usage.memory)

            if counts_in_cluster:
                self.cpu.add_usage(usage.cpu)
                self.memory.add_usage(usage.memory)

        return pm

    @property
    def orphan_pods(self) -> Dict[str, PodMetric]:
        """Pods in the cluster index that are not attributed to any node."""
        attributed = set()
        for nm in self.node_metrics.values():
            attributed.update(nm.pod_metrics)
        return {key: pm for key, pm in self.pod_metrics.items() if key not in attributed}
