"""
Contract tests for health evaluation thresholds
"""

import itertools

import pytest

from vmhealth.evaluate import evaluate_health
from vmhealth.model import Category, HealthStatus, HealthVerdict, Metrics, Violation


@pytest.mark.parametrize("field", ["cpu", "memory", "disk"])
def test_threshold_is_inclusive(field: str) -> None:
    """
    59 contributes no violation, 60 contributes exactly one
    """
    base = {"cpu": 10, "memory": 10, "disk": 10}

    below = evaluate_health(Metrics(**{**base, field: 59}))
    at = evaluate_health(Metrics(**{**base, field: 60}))

    assert below.healthy
    assert below.violations == ()
    assert not at.healthy
    assert len(at.violations) == 1
    assert at.violations[0].category == Category(field)


def test_verdict_healthy_iff_max_below_threshold() -> None:
    """
    Healthy exactly when every metric is under the threshold
    """
    values = [0, 30, 59, 60, 61, 100]
    for cpu, memory, disk in itertools.product(values, repeat=3):
        verdict = evaluate_health(Metrics(cpu=cpu, memory=memory, disk=disk))
        assert verdict.healthy is (max(cpu, memory, disk) < 60)


def test_violations_ordered_cpu_memory_disk() -> None:
    """
    Order follows evaluation order, not magnitude
    """
    verdict = evaluate_health(Metrics(cpu=61, memory=99, disk=75))

    assert verdict.status is HealthStatus.NOT_HEALTHY
    assert verdict.categories == (Category.CPU, Category.MEMORY, Category.DISK)


def test_reason_text() -> None:
    """
    Reason strings carry label, value and threshold
    """
    verdict = evaluate_health(Metrics(cpu=35, memory=78, disk=42))

    assert [v.reason for v in verdict.violations] == ["Memory usage is 78% (threshold: 60%)"]


def test_custom_threshold_is_respected() -> None:
    """
    Injected threshold replaces the default in both check and reason
    """
    verdict = evaluate_health(Metrics(cpu=50, memory=10, disk=10), threshold=50)

    assert verdict.violations == (Violation(Category.CPU, 50, 50),)
    assert verdict.violations[0].reason == "CPU usage is 50% (threshold: 50%)"


def test_verdict_rejects_inconsistent_construction() -> None:
    """
    Status and violations must agree
    """
    with pytest.raises(ValueError):
        HealthVerdict(status=HealthStatus.NOT_HEALTHY)
    with pytest.raises(ValueError):
        HealthVerdict(status=HealthStatus.HEALTHY, violations=(Violation(Category.DISK, 90, 60),))
