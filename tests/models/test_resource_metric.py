# tests/models/test_resource_metric.py
"""
Unit tests for ResourceMetric accumulation, problem classification and rendering.
"""

import pytest

from kubecapacity.models.resource import (
    DisplayValue,
    ResourceMetric,
    ResourceType,
    format_quantity,
    format_value,
    percent_of,
)

MI = 1024 * 1024


def cpu(**kwargs):
    return ResourceMetric(resource_type=ResourceType.CPU, **kwargs)


def memory(**kwargs):
    return ResourceMetric(resource_type=ResourceType.MEMORY, **kwargs)


def test_add_metric_sums_every_field():
    total = cpu(allocatable=1000, utilization=10, request=100, limit=200)
    total.add_metric(cpu(allocatable=2000, utilization=20, request=300, limit=400))

    assert total.allocatable == 3000
    assert total.utilization == 30
    assert total.request == 400
    assert total.limit == 600


def test_new_metric_starts_at_zero():
    metric = memory()
    assert (metric.allocatable, metric.utilization, metric.request, metric.limit) == (0, 0, 0, 0)


@pytest.mark.parametrize(
    "request_value, limit, flagged",
    [
        (0, 0, True),  # no request at all
        (0, 500, True),  # no request, even with a limit
        (10, 5, True),  # request exceeds limit
        (10, 0, False),  # limit unset, not "request exceeds limit"
        (10, 10, False),
        (5, 10, False),
    ],
)
def test_request_flagged(request_value, limit, flagged):
    assert cpu(request=request_value, limit=limit).request_flagged is flagged
    assert memory(request=request_value * MI, limit=limit * MI).request_flagged is flagged


def test_limit_flagged_only_when_unset():
    assert cpu(limit=0).limit_flagged is True
    assert cpu(limit=1).limit_flagged is False
    assert memory(limit=1).limit_flagged is False


@pytest.mark.parametrize(
    "utilization, request_value, flagged",
    [
        (600, 500, True),
        (500, 500, False),
        (100, 500, False),
        (600, 0, False),  # no request to compare against
    ],
)
def test_utilization_flagged(utilization, request_value, flagged):
    assert cpu(utilization=utilization, request=request_value).utilization_flagged is flagged


def test_percent_of_zero_allocatable_is_zero():
    assert percent_of(500, 0) == 0
    assert cpu(request=500).percent(500) == 0


def test_percent_rounds_down():
    assert percent_of(1, 3) == 33
    assert percent_of(2, 3) == 66
    assert percent_of(2999, 1000) == 299


def test_memory_value_truncates_to_mebibytes():
    assert format_value(1048575, ResourceType.MEMORY) == "0Mi"
    assert format_value(1048576, ResourceType.MEMORY) == "1Mi"
    assert format_value(3 * MI - 1, ResourceType.MEMORY) == "2Mi"


def test_cpu_value_in_millicores():
    assert format_value(1500, ResourceType.CPU) == "1500m"


def test_format_quantity():
    assert format_quantity(500, 2000, ResourceType.CPU) == "500m (25%)"
    assert format_quantity(512 * MI, 2048 * MI, ResourceType.MEMORY) == "512Mi (25%)"
    assert format_quantity(512 * MI, 0, ResourceType.MEMORY) == "512Mi (0%)"


def test_display_accessors_carry_classification():
    metric = cpu(allocatable=2000, utilization=600, request=500, limit=0)

    assert metric.request_display() == DisplayValue("500m (25%)", False)
    assert metric.limit_display() == DisplayValue("0m (0%)", True)
    assert metric.utilization_display() == DisplayValue("600m (30%)", True)
