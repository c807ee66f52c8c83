# src/kubecapacity/collectors/pod_collector.py
"""
Collects resource requests and limits (CPU, memory) for all pods
from the Kubernetes API.
"""

import logging
from typing import List, Optional, Set

from kubernetes_asyncio.client.rest import ApiException

from ..core.exceptions import CollectorError, KubeConfigError
from ..core.k8s_client import get_core_v1_api
from ..models.pod import PodInfo
from ..utils.k8s_utils import pod_requests_and_limits
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)

# Pods that have finished no longer hold any resources on their node.
ACTIVE_POD_FIELD_SELECTOR = "status.phase!=Succeeded,status.phase!=Failed"


class PodCollector(BaseCollector):
    """
    Connects to the K8s API and resolves the pod-level requests and limits
    of every active pod.
    """

    async def _ensure_client(self):
        """Lazily initialize the Kubernetes Client."""
        if self._api:
            return self._api

        self._api = await get_core_v1_api(self.kubeconfig, self.context)
        if not self._api:
            raise KubeConfigError("Kubernetes client not configured; cannot list pods.")

        logger.debug("PodCollector initialized with centralized config.")
        return self._api

    async def collect(self, namespace: Optional[str] = None, label_selector: Optional[str] = None) -> List[PodInfo]:
        """
        Fetches active pods and resolves their requests and limits.
        """
        api = await self._ensure_client()

        kwargs = {"watch": False, "field_selector": ACTIVE_POD_FIELD_SELECTOR}
        if label_selector:
            kwargs["label_selector"] = label_selector

        try:
            if namespace:
                pod_list = await api.list_namespaced_pod(namespace, **kwargs)
            else:
                pod_list = await api.list_pod_for_all_namespaces(**kwargs)
        except ApiException as e:
            logger.error(f"Error collecting pods from Kubernetes API: {e}")
            raise CollectorError(f"Failed to list pods: {e.reason}") from e

        pods: List[PodInfo] = []
        for pod in pod_list.items or []:
            if not pod.spec:
                continue

            requests, limits = pod_requests_and_limits(pod.spec)
            pods.append(
                PodInfo(
                    name=pod.metadata.name,
                    namespace=pod.metadata.namespace,
                    node_name=pod.spec.node_name or None,
                    cpu_request=requests["cpu"],
                    cpu_limit=limits["cpu"],
                    memory_request=requests["memory"],
                    memory_limit=limits["memory"],
                    labels=pod.metadata.labels or {},
                )
            )

        logger.debug(f"Collected {len(pods)} pods.")
        return pods

    async def collect_namespaces(self, label_selector: str) -> Set[str]:
        """Returns the names of the namespaces matching a label selector."""
        api = await self._ensure_client()
        try:
            namespaces = await api.list_namespace(label_selector=label_selector, watch=False)
        except ApiException as e:
            logger.error(f"Error listing namespaces from Kubernetes API: {e}")
            raise CollectorError(f"Failed to list namespaces: {e.reason}") from e

        names = {ns.metadata.name for ns in namespaces.items or []}
        logger.debug("Namespaces matching %r: %s", label_selector, sorted(names))
        return names
