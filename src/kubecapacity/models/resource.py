# src/kubecapacity/models/resource.py
"""
Defines the per-resource accumulator used at every level of the capacity
hierarchy (cluster, node, pod), together with the rules that decide when a
figure is worth highlighting and how it is rendered for humans.
"""

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

BYTES_PER_MEBIBYTE = 1048576


class ResourceType(str, Enum):
    """The resources tracked by KubeCapacity."""

    CPU = "cpu"
    MEMORY = "memory"


class ResourceUnit(NamedTuple):
    """How quantities of a resource type are rendered."""

    suffix: str
    divisor: int


# Quantities are always stored in their native unit (millicores, bytes) and
# compared as-is; only rendering differs between resource types.
RESOURCE_UNITS = {
    ResourceType.CPU: ResourceUnit(suffix="m", divisor=1),
    ResourceType.MEMORY: ResourceUnit(suffix="Mi", divisor=BYTES_PER_MEBIBYTE),
}


class DisplayValue(NamedTuple):
    """A rendered quantity and whether it should be highlighted."""

    text: str
    flagged: bool


def percent_of(quantity: int, allocatable: int) -> int:
    """Integer percentage of `quantity` relative to `allocatable`, rounded down.

    Returns 0 when there is no allocatable baseline.
    """
    if allocatable <= 0:
        return 0
    return quantity * 100 // allocatable


def format_value(quantity: int, resource_type: ResourceType) -> str:
    """Renders a raw quantity in the display unit of its resource type."""
    unit = RESOURCE_UNITS[resource_type]
    return f"{quantity // unit.divisor}{unit.suffix}"


def format_quantity(quantity: int, allocatable: int, resource_type: ResourceType) -> str:
    """Renders a quantity as '<value><unit> (<percent>%)'."""
    return f"{format_value(quantity, resource_type)} ({percent_of(quantity, allocatable)}%)"


class ResourceMetric(BaseModel):
    """
    Allocatable, utilization, request and limit figures for one resource at
    one scope. Quantities are millicores for CPU and bytes for memory.
    """

    model_config = ConfigDict(frozen=False, extra="forbid")

    resource_type: ResourceType = Field(..., description="The resource these figures describe.")
    allocatable: int = Field(0, ge=0, description="Capacity available for scheduling.")
    utilization: int = Field(0, ge=0, description="Live measured usage.")
    request: int = Field(0, ge=0, description="Sum of guaranteed amounts.")
    limit: int = Field(0, ge=0, description="Sum of enforced ceilings.")

    def add_metric(self, other: "ResourceMetric") -> None:
        """Adds every figure of `other` into this metric."""
        self.allocatable += other.allocatable
        self.utilization += other.utilization
        self.request += other.request
        self.limit += other.limit

    def add_allocation(self, request: int, limit: int) -> None:
        self.request += request
        self.limit += limit

    def add_usage(self, quantity: int) -> None:
        self.utilization += quantity

    # --- Problem classification ---

    @property
    def request_flagged(self) -> bool:
        # A limit of 0 means no limit is set, not that the request exceeds it.
        return self.request == 0 or (self.request > self.limit and self.limit > 0)

    @property
    def limit_flagged(self) -> bool:
        return self.limit == 0

    @property
    def utilization_flagged(self) -> bool:
        return self.utilization > self.request and self.request > 0

    # --- Display helpers ---

    def value_string(self, quantity: int) -> str:
        return format_value(quantity, self.resource_type)

    def percent(self, quantity: int) -> int:
        return percent_of(quantity, self.allocatable)

    def render(self, quantity: int) -> str:
        return format_quantity(quantity, self.allocatable, self.resource_type)

    def request_display(self) -> DisplayValue:
        return DisplayValue(self.render(self.request), self.request_flagged)

    def limit_display(self) -> DisplayValue:
        return DisplayValue(self.render(self.limit), self.limit_flagged)

    def utilization_display(self) -> DisplayValue:
        return DisplayValue(self.render(self.utilization), self.utilization_flagged)
