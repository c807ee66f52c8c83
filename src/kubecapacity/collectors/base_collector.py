# src/kubecapacity/collectors/base_collector.py
"""
This module defines the abstract base class for all data collectors.
Every collector reads one kind of object from the Kubernetes API and returns
Pydantic models, so the processor can treat them interchangeably.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class BaseCollector(ABC):
    """
    Abstract Base Class for all Kubernetes collectors.
    """

    def __init__(self, kubeconfig: Optional[str] = None, context: Optional[str] = None):
        self.kubeconfig = kubeconfig
        self.context = context
        self._api = None

    @abstractmethod
    async def collect(self, **kwargs) -> Any:
        """
        The main method for a collector. It should fetch data from the
        cluster, parse it, and return Pydantic models.

        Raises:
            KubeConfigError: If no Kubernetes configuration could be loaded.
            CollectorError: If the Kubernetes API call fails.
        """
        pass

    async def close(self):
        """Close the Kubernetes API client if it exists."""
        if self._api:
            await self._api.api_client.close()
            self._api = None
