"""
vmhealth.render.base

Renderer interface
"""

from __future__ import annotations

from vmhealth.model import HealthVerdict, Metrics


class Renderer:
    name: str = "base"

    def render(self, metrics: Metrics, verdict: HealthVerdict, *, meta: dict) -> str:
        raise NotImplementedError
