# src/kubecapacity/models/node.py

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class NodeInfo(BaseModel):
    """
    Pydantic model for the node inventory read from Kubernetes.

    Attributes:
        name: Node name
        allocatable_cpu: Allocatable CPU in millicores
        allocatable_memory: Allocatable memory in bytes
        labels: Node labels
    """

    model_config = ConfigDict(frozen=False, extra="forbid")

    name: str = Field(..., description="Node name")
    allocatable_cpu: int = Field(0, ge=0, description="Allocatable CPU in millicores")
    allocatable_memory: int = Field(0, ge=0, description="Allocatable memory in bytes")
    labels: Dict[str, str] = Field(default_factory=dict, description="Node labels")
