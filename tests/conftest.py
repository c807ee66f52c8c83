# tests/conftest.py

import pytest

from kubecapacity.models.node import NodeInfo
from kubecapacity.models.pod import ContainerUsage, PodInfo, PodUsage

MI = 1024 * 1024


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Pytest fixture to mock environment variables for the config module.

    This fixture runs automatically for every test (`autouse=True`) so the
    application's config is predictable and isolated from the actual
    environment.
    """
    monkeypatch.setenv("KUBECAPACITY_COLOR", "auto")
    monkeypatch.delenv("ORPHAN_POD_POLICY", raising=False)
    monkeypatch.delenv("KUBE_CONTEXT", raising=False)


@pytest.fixture(autouse=True)
def reset_k8s_config_state(monkeypatch):
    """
    Make every test start as if no Kubernetes configuration had been loaded,
    so tests never depend on a kubeconfig from an earlier test or the host.
    """
    from kubecapacity.core import k8s_client

    monkeypatch.setattr(k8s_client, "_CONFIG_LOADED", False)


@pytest.fixture
def sample_nodes():
    return [
        NodeInfo(name="node-a", allocatable_cpu=2000, allocatable_memory=2048 * MI),
        NodeInfo(name="node-b", allocatable_cpu=4000, allocatable_memory=8192 * MI),
    ]


@pytest.fixture
def sample_pods():
    return [
        PodInfo(
            name="web-1",
            namespace="prod",
            node_name="node-a",
            cpu_request=500,
            cpu_limit=1000,
            memory_request=512 * MI,
            memory_limit=1024 * MI,
        ),
        PodInfo(
            name="worker-1",
            namespace="prod",
            node_name="node-b",
            cpu_request=250,
            cpu_limit=0,
            memory_request=256 * MI,
            memory_limit=512 * MI,
        ),
        PodInfo(
            name="cache-1",
            namespace="infra",
            node_name="node-b",
            cpu_request=100,
            cpu_limit=200,
            memory_request=128 * MI,
            memory_limit=128 * MI,
        ),
    ]


@pytest.fixture
def sample_usages():
    return {
        "prod/web-1": PodUsage(
            name="web-1",
            namespace="prod",
            containers=[
                ContainerUsage(name="app", cpu=400, memory=400 * MI),
                ContainerUsage(name="sidecar", cpu=200, memory=200 * MI),
            ],
        ),
        "infra/cache-1": PodUsage(
            name="cache-1",
            namespace="infra",
            containers=[ContainerUsage(name="redis", cpu=50, memory=100 * MI)],
        ),
    }
