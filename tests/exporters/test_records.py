# tests/exporters/test_records.py

from kubecapacity.core.aggregator import build_cluster_metric
from kubecapacity.exporters.records import cluster_to_records
from kubecapacity.models.pod import PodInfo


def test_records_order_and_scopes(sample_nodes, sample_pods):
    cluster = build_cluster_metric(sample_nodes, sample_pods)

    records = cluster_to_records(cluster, include_pods=True)

    assert [(r["scope"], r["node"], r["pod"]) for r in records] == [
        ("cluster", None, None),
        ("node", "node-a", None),
        ("node", "node-b", None),
        ("pod", "node-b", "cache-1"),
        ("pod", "node-a", "web-1"),
        ("pod", "node-b", "worker-1"),
    ]


def test_records_quantities_are_raw(sample_nodes, sample_pods):
    cluster = build_cluster_metric(sample_nodes, sample_pods)

    node_b = cluster_to_records(cluster)[2]

    assert node_b["cpu_allocatable"] == 4000
    assert node_b["cpu_request"] == 350
    assert node_b["cpu_request_percent"] == 8
    assert node_b["memory_limit"] == 640 * 1024 * 1024
    assert "cpu_utilization" not in node_b


def test_records_include_orphans(sample_nodes):
    cluster = build_cluster_metric(sample_nodes, [PodInfo(name="stray", namespace="default", cpu_request=10)])

    records = cluster_to_records(cluster, include_pods=True, include_util=True)

    stray = records[-1]
    assert stray["pod"] == "stray"
    assert stray["node"] is None
    assert stray["cpu_allocatable"] == 0
    assert stray["cpu_utilization"] == 0
