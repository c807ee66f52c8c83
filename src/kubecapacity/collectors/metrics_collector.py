# src/kubecapacity/collectors/metrics_collector.py
"""
Collects live per-container CPU and memory usage from the metrics.k8s.io API
served by metrics-server.
"""

import logging
from typing import Dict, Optional

from kubernetes_asyncio.client.rest import ApiException

from ..core.exceptions import CollectorError, KubeConfigError, MetricsUnavailableError
from ..core.k8s_client import get_custom_objects_api
from ..models.pod import ContainerUsage, PodUsage
from ..utils.k8s_utils import parse_cpu, parse_memory
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)

METRICS_GROUP = "metrics.k8s.io"
METRICS_VERSION = "v1beta1"


class PodMetricsCollector(BaseCollector):
    """Reads PodMetrics objects and converts them to PodUsage models."""

    async def _ensure_client(self):
        if self._api:
            return self._api

        self._api = await get_custom_objects_api(self.kubeconfig, self.context)
        if not self._api:
            raise KubeConfigError("Kubernetes client not configured; cannot read pod metrics.")
        return self._api

    async def collect(
        self, namespace: Optional[str] = None, label_selector: Optional[str] = None
    ) -> Dict[str, PodUsage]:
        """
        Fetches current usage for all pods.

        Returns:
            Dict[str, PodUsage]: usage keyed by 'namespace/name'. Pods that
            metrics-server is not reporting yet are simply absent.
        """
        api = await self._ensure_client()

        kwargs = {}
        if label_selector:
            kwargs["label_selector"] = label_selector

        try:
            if namespace:
                response = await api.list_namespaced_custom_object(
                    METRICS_GROUP, METRICS_VERSION, namespace, "pods", **kwargs
                )
            else:
                response = await api.list_cluster_custom_object(METRICS_GROUP, METRICS_VERSION, "pods", **kwargs)
        except ApiException as e:
            if e.status == 404:
                logger.error("The metrics.k8s.io API is not available; is metrics-server installed?")
                raise MetricsUnavailableError(
                    "Pod metrics are not available. Install metrics-server to show utilization."
                ) from e
            logger.error(f"Error collecting pod metrics from Kubernetes API: {e}")
            raise CollectorError(f"Failed to list pod metrics: {e.reason}") from e

        usages: Dict[str, PodUsage] = {}
        for item in response.get("items", []):
            metadata = item.get("metadata", {})
            usage = PodUsage(
                name=metadata.get("name", ""),
                namespace=metadata.get("namespace", ""),
                containers=[
                    ContainerUsage(
                        name=container.get("name", ""),
                        cpu=parse_cpu(container.get("usage", {}).get("cpu")),
                        memory=parse_memory(container.get("usage", {}).get("memory")),
                    )
                    for container in item.get("containers", [])
                ],
            )
            usages[usage.key] = usage

        logger.debug(f"Collected usage for {len(usages)} pods.")
        return usages
