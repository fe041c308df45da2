"""
vmhealth.evaluate

Health evaluation against a single threshold
"""

from __future__ import annotations

from vmhealth.model import HealthStatus, HealthVerdict, Metrics, Violation

DEFAULT_THRESHOLD = 60


def evaluate_health(metrics: Metrics, threshold: int = DEFAULT_THRESHOLD) -> HealthVerdict:
    """
    Evaluate every metric in CPU, Memory, Disk order

    A metric violates when value >= threshold; all three are always checked
    """
    violations = [
        Violation(category=category, value=value, threshold=threshold)
        for category, value in metrics.ordered()
        if value >= threshold
    ]

    if violations:
        return HealthVerdict(status=HealthStatus.NOT_HEALTHY, violations=tuple(violations))
    return HealthVerdict(status=HealthStatus.HEALTHY)
