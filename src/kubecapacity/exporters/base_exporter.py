from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import aiofiles

from ..models.capacity import ClusterMetric
from .records import cluster_to_records


class BaseExporter(ABC):
    """Abstract base class for file exporters.

    Subclasses should provide a DEFAULT_FILENAME and implement `render`, which
    turns flattened capacity records into the file contents.
    """

    DEFAULT_FILENAME: str = "kubecapacity-report"

    @abstractmethod
    def render(self, records: List[Dict[str, Any]]) -> str:
        raise NotImplementedError()

    async def export(
        self,
        cluster: ClusterMetric,
        path: str | None = None,
        include_pods: bool = False,
        include_util: bool = False,
    ) -> str:
        """Export the capacity tree to disk. Return the written path."""
        out_path = path or self.DEFAULT_FILENAME
        records = cluster_to_records(cluster, include_pods=include_pods, include_util=include_util)
        content = self.render(records)

        # Ensure parent directory exists
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)

        async with aiofiles.open(out_path, "w", encoding="utf-8", newline="") as fh:
            await fh.write(content)
        return out_path
