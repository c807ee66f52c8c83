from decimal import ROUND_CEILING, Decimal, InvalidOperation
from typing import Dict, Mapping, Optional, Tuple

# Binary suffixes must be checked before the single-letter decimal ones.
_BINARY_SUFFIXES = {
    "Ki": Decimal(1024),
    "Mi": Decimal(1024) ** 2,
    "Gi": Decimal(1024) ** 3,
    "Ti": Decimal(1024) ** 4,
    "Pi": Decimal(1024) ** 5,
    "Ei": Decimal(1024) ** 6,
}

_DECIMAL_SUFFIXES = {
    "n": Decimal("0.000000001"),
    "u": Decimal("0.000001"),
    "m": Decimal("0.001"),
    "k": Decimal(1000),
    "M": Decimal(1000) ** 2,
    "G": Decimal(1000) ** 3,
    "T": Decimal(1000) ** 4,
    "P": Decimal(1000) ** 5,
    "E": Decimal(1000) ** 6,
}

RESOURCE_NAMES = ("cpu", "memory")


def parse_quantity(quantity) -> Decimal:
    """
    Parse kubernetes quantity to Decimal.
    Unparseable values are treated as 0.
    """
    if quantity is None:
        return Decimal(0)
    if isinstance(quantity, (int, float, Decimal)):
        return Decimal(quantity)

    quantity = str(quantity).strip()
    number, multiplier = quantity, Decimal(1)
    for suffixes, width in ((_BINARY_SUFFIXES, 2), (_DECIMAL_SUFFIXES, 1)):
        suffix = quantity[-width:]
        if len(quantity) > width and suffix in suffixes:
            number, multiplier = quantity[:-width], suffixes[suffix]
            break

    try:
        return Decimal(number) * multiplier
    except InvalidOperation:
        return Decimal(0)


def _ceil(value: Decimal) -> int:
    # Kubernetes rounds fractional milli-values and byte values up.
    return int(value.to_integral_value(rounding=ROUND_CEILING))


def parse_cpu(cpu: Optional[str]) -> int:
    """Converts K8s CPU string to millicores (int)."""
    if not cpu:
        return 0
    return max(_ceil(parse_quantity(cpu) * 1000), 0)


def parse_memory(memory: Optional[str]) -> int:
    """Converts K8s memory string to bytes (int)."""
    if not memory:
        return 0
    return max(_ceil(parse_quantity(memory)), 0)


def parse_resource(name: str, value: Optional[str]) -> int:
    """Parses a quantity into the native unit of the named resource."""
    if name == "cpu":
        return parse_cpu(value)
    return parse_memory(value)


def _parse_resource_list(resources: Optional[Mapping[str, str]]) -> Dict[str, int]:
    resources = resources or {}
    return {name: parse_resource(name, resources.get(name)) for name in RESOURCE_NAMES}


def pod_requests_and_limits(spec) -> Tuple[Dict[str, int], Dict[str, int]]:
    """
    Resolves pod-level CPU/memory requests and limits from a V1PodSpec.

    App containers are summed, then each init container raises the total to
    its own value if larger (init containers run one at a time before the app
    containers start). Pod overhead is added to requests, and to limits only
    where a limit is set.

    Returns:
        (requests, limits): dicts keyed by 'cpu' (millicores) and 'memory' (bytes).
    """
    requests = {name: 0 for name in RESOURCE_NAMES}
    limits = {name: 0 for name in RESOURCE_NAMES}

    for container in spec.containers or []:
        resources = container.resources
        container_requests = _parse_resource_list(resources.requests if resources else None)
        container_limits = _parse_resource_list(resources.limits if resources else None)
        for name in RESOURCE_NAMES:
            requests[name] += container_requests[name]
            limits[name] += container_limits[name]

    for container in spec.init_containers or []:
        resources = container.resources
        container_requests = _parse_resource_list(resources.requests if resources else None)
        container_limits = _parse_resource_list(resources.limits if resources else None)
        for name in RESOURCE_NAMES:
            requests[name] = max(requests[name], container_requests[name])
            limits[name] = max(limits[name], container_limits[name])

    overhead = getattr(spec, "overhead", None)
    if overhead:
        pod_overhead = _parse_resource_list(overhead)
        for name in RESOURCE_NAMES:
            requests[name] += pod_overhead[name]
            if limits[name] > 0:
                limits[name] += pod_overhead[name]

    return requests, limits
