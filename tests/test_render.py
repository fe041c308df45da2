"""
Contract tests for report rendering

Line content is the parseable contract; styling must not leak into it
"""

import pytest

from vmhealth.evaluate import evaluate_health
from vmhealth.model import Metrics
from vmhealth.render import get_renderer

META = {"threshold": 60, "color": False}

CPU_ADVICE = "    - CPU: Check running processes and optimize heavy workloads"
MEMORY_ADVICE = "    - Memory: Review memory-consuming applications and consider increasing RAM"
DISK_ADVICE = "    - Disk: Free up disk space by removing unused files and archives"


def _render(mode: str, cpu: int, memory: int, disk: int, meta: dict = META) -> list[str]:
    metrics = Metrics(cpu=cpu, memory=memory, disk=disk)
    verdict = evaluate_health(metrics)
    return get_renderer(mode).render(metrics, verdict, meta=meta).splitlines()


def test_plain_healthy_lines() -> None:
    assert _render("plain", 28, 42, 35) == [
        "Health Status: Healthy",
        "",
        "Virtual Machine Metrics:",
        "  CPU Usage: 28%",
        "  Memory Usage: 42%",
        "  Disk Usage: 35%",
    ]


def test_plain_has_no_explanation() -> None:
    lines = _render("plain", 65, 88, 92)

    assert lines[0] == "Health Status: Not Healthy"
    assert "Explanation:" not in lines


def test_explain_healthy_confirmations() -> None:
    lines = _render("explain", 28, 42, 35)

    assert lines[6:] == [
        "",
        "Explanation:",
        "  ✓ All metrics are below the 60% threshold",
        "  ✓ CPU usage (28%) is under control",
        "  ✓ Memory usage (42%) is under control",
        "  ✓ Disk usage (35%) is under control",
    ]


def test_explain_single_violation() -> None:
    """
    Only the violated category gets a reason and a recommendation
    """
    lines = _render("explain", 35, 78, 42)

    assert lines[0] == "Health Status: Not Healthy"
    assert lines[6:] == [
        "",
        "Explanation:",
        "  ✗ Memory usage is 78% (threshold: 60%)",
        "",
        "  Recommendation(s):",
        MEMORY_ADVICE,
    ]


def test_explain_all_violations_in_order() -> None:
    lines = _render("explain", 65, 88, 92)

    assert lines[6:] == [
        "",
        "Explanation:",
        "  ✗ CPU usage is 65% (threshold: 60%)",
        "  ✗ Memory usage is 88% (threshold: 60%)",
        "  ✗ Disk usage is 92% (threshold: 60%)",
        "",
        "  Recommendation(s):",
        CPU_ADVICE,
        MEMORY_ADVICE,
        DISK_ADVICE,
    ]


def test_explain_cpu_and_disk_only() -> None:
    """
    Two violations -> two reasons, two recommendations, no memory advice
    """
    lines = _render("explain", 70, 20, 95)

    reasons = [line for line in lines if line.startswith("  ✗ ")]
    advice = [line for line in lines if line.startswith("    - ")]

    assert len(reasons) == 2
    assert advice == [CPU_ADVICE, DISK_ADVICE]
    assert not any("Memory:" in line for line in lines)


def test_color_only_styles_status_line() -> None:
    """
    Colored output keeps the same text once ANSI codes are removed
    """
    plain = _render("explain", 65, 20, 20)
    colored = _render("explain", 65, 20, 20, meta={"threshold": 60, "color": True})

    assert colored[0] != plain[0]
    assert "Health Status: Not Healthy" in colored[0]
    assert colored[1:] == plain[1:]


def test_unknown_renderer() -> None:
    with pytest.raises(ValueError, match="unknown renderer"):
        get_renderer("json")
