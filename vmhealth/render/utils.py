"""
vmhealth.render.utils

Formatting helpers for renderers
"""

from __future__ import annotations

import typer

from vmhealth.model import HealthVerdict, Metrics


def format_pct(value: int) -> str:
    return f"{value}%"


def status_line(verdict: HealthVerdict, *, color: bool) -> str:
    line = f"Health Status: {verdict.status.value}"
    if not color:
        return line
    fg = typer.colors.GREEN if verdict.healthy else typer.colors.RED
    return typer.style(line, fg=fg)


def metric_lines(metrics: Metrics) -> list[str]:
    return [
        "Virtual Machine Metrics:",
        *(f"  {category.label} Usage: {format_pct(value)}" for category, value in metrics.ordered()),
    ]
