# src/kubecapacity/collectors/node_collector.py

import logging
from typing import List, Optional

from kubernetes_asyncio.client.rest import ApiException

from ..core.exceptions import CollectorError, KubeConfigError
from ..core.k8s_client import get_core_v1_api
from ..models.node import NodeInfo
from ..utils.k8s_utils import parse_cpu, parse_memory
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)


class NodeCollector(BaseCollector):
    """Collects the node inventory and allocatable capacity from the Kubernetes cluster."""

    async def _ensure_client(self):
        """
        Lazily initialize the Kubernetes Async client using the centralized thread-safe loader.
        """
        if self._api:
            return self._api

        self._api = await get_core_v1_api(self.kubeconfig, self.context)
        if not self._api:
            raise KubeConfigError("Kubernetes client not configured; cannot list nodes.")
        return self._api

    async def collect(self, label_selector: Optional[str] = None) -> List[NodeInfo]:
        """
        Lists nodes, optionally filtered by a label selector.

        Returns:
            List[NodeInfo]: one entry per node with its allocatable CPU and memory.
        """
        api = await self._ensure_client()

        kwargs = {"watch": False}
        if label_selector:
            kwargs["label_selector"] = label_selector

        try:
            nodes = await api.list_node(**kwargs)
        except ApiException as e:
            logger.error("Kubernetes API error while listing nodes: %s", e)
            raise CollectorError(f"Failed to list nodes: {e.reason}") from e

        nodes_info = []
        for node in nodes.items or []:
            node_name = node.metadata.name
            allocatable = (node.status.allocatable if node.status else None) or {}

            info = NodeInfo(
                name=node_name,
                allocatable_cpu=parse_cpu(allocatable.get("cpu")),
                allocatable_memory=parse_memory(allocatable.get("memory")),
                labels=node.metadata.labels or {},
            )
            nodes_info.append(info)

            logger.debug(
                " -> Node '%s': allocatable cpu=%sm, memory=%s bytes",
                node_name,
                info.allocatable_cpu,
                info.allocatable_memory,
            )

        if not nodes_info:
            logger.warning("No nodes found in the cluster (selector=%r).", label_selector)

        logger.debug(f"Collected {len(nodes_info)} nodes.")
        return nodes_info
