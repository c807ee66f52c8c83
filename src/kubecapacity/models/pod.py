# src/kubecapacity/models/pod.py
"""
Pydantic models for the pod data gathered by the collectors: resolved
pod-level requests and limits from the Kubernetes API, and per-container
live usage from the metrics API.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


def pod_key(namespace: str, name: str) -> str:
    """Identity of a pod across namespaces."""
    return f"{namespace}/{name}"


class PodInfo(BaseModel):
    """
    A pod's placement and its pod-level resource totals, with init containers
    and overhead already folded in.
    """

    name: str = Field(..., description="The name of the Kubernetes pod.")
    namespace: str = Field(..., description="The namespace the pod belongs to.")
    node_name: Optional[str] = Field(None, description="The node the pod is scheduled on, if any.")
    cpu_request: int = Field(0, ge=0, description="CPU request in millicores.")
    cpu_limit: int = Field(0, ge=0, description="CPU limit in millicores.")
    memory_request: int = Field(0, ge=0, description="Memory request in bytes.")
    memory_limit: int = Field(0, ge=0, description="Memory limit in bytes.")
    labels: Dict[str, str] = Field(default_factory=dict)

    @property
    def key(self) -> str:
        return pod_key(self.namespace, self.name)


class ContainerUsage(BaseModel):
    """A single live usage sample for one container."""

    name: str = ""
    cpu: int = Field(0, ge=0, description="CPU usage in millicores.")
    memory: int = Field(0, ge=0, description="Memory usage in bytes.")


class PodUsage(BaseModel):
    """Live usage for every container of a pod, as reported by metrics-server."""

    name: str
    namespace: str
    containers: List[ContainerUsage] = Field(default_factory=list)

    @property
    def key(self) -> str:
        return pod_key(self.namespace, self.name)
