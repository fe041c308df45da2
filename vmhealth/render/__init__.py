"""vmhealth.render registry."""

from __future__ import annotations

from vmhealth.render.explain import ExplainRenderer
from vmhealth.render.plain import PlainRenderer

_RENDERERS = {
    "plain": PlainRenderer(),
    "explain": ExplainRenderer(),
}


def get_renderer(name: str):
    if name not in _RENDERERS:
        raise ValueError(f"unknown renderer: {name}")
    return _RENDERERS[name]
