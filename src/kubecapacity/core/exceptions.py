class KubeCapacityError(Exception):
    """Base exception for KubeCapacity."""

    pass


class DuplicatePodError(KubeCapacityError):
    """Raised when the same pod is attributed to a cluster twice."""

    def __init__(self, key: str):
        super().__init__(f"Pod '{key}' has already been attributed to this cluster.")
        self.key = key


class KubeConfigError(KubeCapacityError):
    """Raised when no Kubernetes configuration could be loaded."""

    pass


class CollectorError(KubeCapacityError):
    """Raised when a collector fails to read from the Kubernetes API."""

    pass


class MetricsUnavailableError(CollectorError):
    """Raised when the metrics.k8s.io API is not served by the cluster."""

    pass
