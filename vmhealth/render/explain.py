"""
vmhealth.render.explain

Human explanation renderer: plain output plus reasons and remediation hints
"""

from __future__ import annotations

from vmhealth.model import CATEGORY_ORDER, Category
from vmhealth.render.base import Renderer
from vmhealth.render.plain import PlainRenderer
from vmhealth.render.utils import format_pct


RECOMMENDATIONS = {
    Category.CPU: "Check running processes and optimize heavy workloads",
    Category.MEMORY: "Review memory-consuming applications and consider increasing RAM",
    Category.DISK: "Free up disk space by removing unused files and archives",
}


def _healthy_lines(metrics, threshold: int) -> list[str]:
    lines = [f"  ✓ All metrics are below the {format_pct(threshold)} threshold"]
    for category, value in metrics.ordered():
        lines.append(f"  ✓ {category.label} usage ({format_pct(value)}) is under control")
    return lines


def _unhealthy_lines(verdict) -> list[str]:
    lines = [f"  ✗ {violation.reason}" for violation in verdict.violations]

    lines.append("")
    lines.append("  Recommendation(s):")

    violated = set(verdict.categories)
    for category in CATEGORY_ORDER:
        if category in violated:
            lines.append(f"    - {category.label}: {RECOMMENDATIONS[category]}")

    return lines


class ExplainRenderer(Renderer):
    name = "explain"

    def render(self, metrics, verdict, *, meta: dict) -> str:
        blocks = [PlainRenderer().render(metrics, verdict, meta=meta), "", "Explanation:"]

        if verdict.healthy:
            blocks.extend(_healthy_lines(metrics, meta["threshold"]))
        else:
            blocks.extend(_unhealthy_lines(verdict))

        return "\n".join(blocks)
