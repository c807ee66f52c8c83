# src/kubecapacity/exporters/records.py
"""
Flattens the capacity tree into plain records for file exporters.
"""

from typing import Any, Dict, List, Optional

from ..models.capacity import ClusterMetric
from ..models.resource import ResourceMetric

FIELDS = ("request", "limit", "utilization")


def _resource_fields(prefix: str, metric: ResourceMetric, include_util: bool) -> Dict[str, Any]:
    record: Dict[str, Any] = {f"{prefix}_allocatable": metric.allocatable}
    for field in FIELDS:
        if field == "utilization" and not include_util:
            continue
        quantity = getattr(metric, field)
        record[f"{prefix}_{field}"] = quantity
        record[f"{prefix}_{field}_percent"] = metric.percent(quantity)
    return record


def _record(
    scope: str,
    node: Optional[str],
    namespace: Optional[str],
    pod: Optional[str],
    cpu: ResourceMetric,
    memory: ResourceMetric,
    include_util: bool,
) -> Dict[str, Any]:
    record: Dict[str, Any] = {"scope": scope, "node": node, "namespace": namespace, "pod": pod}
    record.update(_resource_fields("cpu", cpu, include_util))
    record.update(_resource_fields("memory", memory, include_util))
    return record


def cluster_to_records(cluster: ClusterMetric, include_pods: bool = False, include_util: bool = False) -> List[Dict]:
    """
    Returns one record for the cluster, one per node (sorted by name) and,
    when `include_pods` is set, one per pod (sorted by namespace/name).

    Quantities are raw: millicores for CPU and bytes for memory. Pods that
    are not on a known node have `node` set to their scheduled node name (or
    None) and an allocatable of 0.
    """
    records = [_record("cluster", None, None, None, cluster.cpu, cluster.memory, include_util)]

    for name in sorted(cluster.node_metrics):
        nm = cluster.node_metrics[name]
        records.append(_record("node", name, None, None, nm.cpu, nm.memory, include_util))

    if include_pods:
        for key in sorted(cluster.pod_metrics):
            pm = cluster.pod_metrics[key]
            records.append(_record("pod", pm.node_name, pm.namespace, pm.name, pm.cpu, pm.memory, include_util))

    return records
