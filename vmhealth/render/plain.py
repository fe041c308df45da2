"""
vmhealth.render.plain

Status + metrics renderer
"""

from __future__ import annotations

from vmhealth.render.base import Renderer
from vmhealth.render.utils import metric_lines, status_line


class PlainRenderer(Renderer):
    name = "plain"

    def render(self, metrics, verdict, *, meta: dict) -> str:
        lines = [status_line(verdict, color=meta.get("color", False)), ""]
        lines.extend(metric_lines(metrics))
        return "\n".join(lines)
