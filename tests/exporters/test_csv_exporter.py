# tests/exporters/test_csv_exporter.py

import csv

import pytest

from kubecapacity.core.aggregator import build_cluster_metric
from kubecapacity.exporters.csv_exporter import CSVExporter
from kubecapacity.models.pod import PodInfo


@pytest.mark.asyncio
async def test_csv_exporter_nodes(tmp_path, sample_nodes, sample_pods):
    exporter = CSVExporter()
    out = tmp_path / "kubecapacity-report.csv"
    cluster = build_cluster_metric(sample_nodes, sample_pods)

    written = await exporter.export(cluster, str(out))

    assert written == str(out)
    with open(out, newline="", encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))
    assert [r["scope"] for r in rows] == ["cluster", "node", "node"]
    assert rows[1]["node"] == "node-a"
    assert rows[1]["cpu_request"] == "500"
    assert rows[1]["cpu_request_percent"] == "25"
    assert "cpu_utilization" not in rows[0]


@pytest.mark.asyncio
async def test_csv_exporter_creates_parent_directory(tmp_path, sample_nodes):
    out = tmp_path / "nested" / "dir" / "report.csv"

    await CSVExporter().export(build_cluster_metric(sample_nodes, []), str(out))

    assert out.exists()


@pytest.mark.asyncio
async def test_csv_exporter_injection(tmp_path, sample_nodes):
    exporter = CSVExporter()
    out = tmp_path / "kubecapacity-report-injection.csv"
    pods = [
        PodInfo(name="=cmd|' /C calc'!A0", namespace="default", node_name="node-a"),
        PodInfo(name="normal-pod", namespace="+bad-namespace", node_name="node-a"),
    ]
    cluster = build_cluster_metric(sample_nodes, pods)

    await exporter.export(cluster, str(out), include_pods=True)

    content = out.read_text(encoding="utf-8")
    assert "'=cmd" in content
    assert "'+bad-namespace" in content


def test_csv_render_empty_records():
    assert CSVExporter().render([]) == ""
