"""
vmhealth.model

Metric + verdict types shared by evaluation and rendering.

Design goals:
- Immutable values, built once per run
- Fixed category order (CPU, Memory, Disk) everywhere it matters
- Violation carries its category, so nothing downstream re-parses text
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class Category(Enum):
    CPU = "cpu"
    MEMORY = "memory"
    DISK = "disk"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Category.CPU: "CPU",
    Category.MEMORY: "Memory",
    Category.DISK: "Disk",
}

CATEGORY_ORDER = (Category.CPU, Category.MEMORY, Category.DISK)


class HealthStatus(Enum):
    HEALTHY = "Healthy"
    NOT_HEALTHY = "Not Healthy"


@dataclass(frozen=True)
class Metrics:
    """
    One sample of the three utilization percentages
    """

    cpu: int
    memory: int
    disk: int

    def value_of(self, category: Category) -> int:
        return getattr(self, category.value)

    def ordered(self) -> Iterator[tuple[Category, int]]:
        for category in CATEGORY_ORDER:
            yield category, self.value_of(category)


@dataclass(frozen=True)
class Violation:
    """
    A metric at or above the threshold
    """

    category: Category
    value: int
    threshold: int

    @property
    def reason(self) -> str:
        return f"{self.category.label} usage is {self.value}% (threshold: {self.threshold}%)"


@dataclass(frozen=True)
class HealthVerdict:
    """
    Health assessment
    - status: HEALTHY | NOT_HEALTHY
    - violations: ordered CPU, Memory, Disk; empty iff HEALTHY
    """

    status: HealthStatus
    violations: tuple[Violation, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but store a tuple
        object.__setattr__(self, "violations", tuple(self.violations))

        if self.status is HealthStatus.HEALTHY and self.violations:
            raise ValueError("a healthy verdict cannot carry violations")
        if self.status is HealthStatus.NOT_HEALTHY and not self.violations:
            raise ValueError("a not-healthy verdict needs at least one violation")

    @property
    def healthy(self) -> bool:
        return self.status is HealthStatus.HEALTHY

    @property
    def categories(self) -> tuple[Category, ...]:
        return tuple(violation.category for violation in self.violations)
