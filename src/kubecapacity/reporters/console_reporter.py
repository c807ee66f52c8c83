# src/kubecapacity/reporters/console_reporter.py
"""
A reporter that displays the capacity tree in a formatted table in the console.
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..models.capacity import ClusterMetric, NodeMetric
from ..models.resource import DisplayValue, ResourceMetric
from .base_reporter import BaseReporter

logger = logging.getLogger(__name__)

FLAGGED_STYLE = "red"
NORMAL_STYLE = "white"
CLUSTER_MARKER = "*"


def styled(value: DisplayValue) -> Text:
    """Wraps a rendered quantity in the style matching its classification."""
    return Text(value.text, style=FLAGGED_STYLE if value.flagged else NORMAL_STYLE)


class ConsoleReporter(BaseReporter):
    """
    Renders the cluster -> node -> pod capacity tree to the console using the 'rich' library.

    `color` forces colored output on (True) or off (False); None lets rich
    detect whether the output is a terminal.
    """

    def __init__(self, color: Optional[bool] = None):
        self.color = color
        self.console = Console(force_terminal=True if color else None, no_color=color is False)

    def _resource_cells(self, metric: ResourceMetric, show_util: bool) -> List[Text]:
        cells = [styled(metric.request_display()), styled(metric.limit_display())]
        if show_util:
            cells.append(styled(metric.utilization_display()))
        return cells

    def _metric_cells(self, cpu: ResourceMetric, memory: ResourceMetric, show_util: bool) -> List[Text]:
        return self._resource_cells(cpu, show_util) + self._resource_cells(memory, show_util)

    def _build_table(self, show_pods: bool, show_util: bool) -> Table:
        table = Table(title="Kubernetes Capacity", header_style="bold", box=None, pad_edge=False)
        table.add_column("NODE", style="cyan")
        if show_pods:
            table.add_column("NAMESPACE", style="cyan")
            table.add_column("POD", style="cyan")

        for resource in ("CPU", "MEMORY"):
            table.add_column(f"{resource} REQUESTS", justify="right")
            table.add_column(f"{resource} LIMITS", justify="right")
            if show_util:
                table.add_column(f"{resource} UTIL", justify="right")
        return table

    def _add_node_rows(self, table: Table, name: str, nm: NodeMetric, show_pods: bool, show_util: bool):
        prefix = [name, CLUSTER_MARKER, CLUSTER_MARKER] if show_pods else [name]
        table.add_row(*prefix, *self._metric_cells(nm.cpu, nm.memory, show_util))

        if not show_pods:
            return

        for key in sorted(nm.pod_metrics):
            pm = nm.pod_metrics[key]
            table.add_row(name, pm.namespace, pm.name, *self._metric_cells(pm.cpu, pm.memory, show_util))
        table.add_section()

    def report(self, cluster: ClusterMetric, show_pods: bool = False, show_util: bool = False):
        """
        Displays one row per node (sorted by name), preceded by a cluster row
        when there is more than one node, and optionally one row per pod.
        """
        if not cluster.node_metrics:
            self.console.print("No nodes to report.", style="yellow")
            return

        table = self._build_table(show_pods, show_util)

        if len(cluster.node_metrics) > 1:
            prefix = [CLUSTER_MARKER] * (3 if show_pods else 1)
            table.add_row(*prefix, *self._metric_cells(cluster.cpu, cluster.memory, show_util))
            table.add_section()

        for name in sorted(cluster.node_metrics):
            self._add_node_rows(table, name, cluster.node_metrics[name], show_pods, show_util)

        self.console.print(table)
