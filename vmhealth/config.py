"""
vmhealth.config

Runtime configuration with defaults

Threshold and mount point are fixed for the CLI but injectable for callers
that build the pipeline themselves. Only operational knobs are read from
the environment:
- VM_HEALTH_COLLECTOR_TIMEOUT: seconds to wait for each collector
- VM_HEALTH_EVENTS: "1" enables JSON event lines on stderr
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Mapping

from vmhealth.collectors.cpu import CPU_SAMPLE_INTERVAL_S
from vmhealth.evaluate import DEFAULT_THRESHOLD

TIMEOUT_ENV = "VM_HEALTH_COLLECTOR_TIMEOUT"
EVENTS_ENV = "VM_HEALTH_EVENTS"


@dataclass(frozen=True)
class HealthConfig:
    threshold: int = DEFAULT_THRESHOLD
    mount_point: str = "/"
    collector_timeout_s: float = 5.0
    cpu_sample_interval_s: float = CPU_SAMPLE_INTERVAL_S
    emit_events: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.threshold <= 100:
            raise ValueError("threshold must be between 0 and 100")
        if not self.mount_point:
            raise ValueError("mount_point must be non-empty")
        if not math.isfinite(self.collector_timeout_s):
            raise ValueError("collector timeout must be a finite number of seconds")
        if self.collector_timeout_s <= 0:
            raise ValueError("collector timeout must be positive")
        if self.cpu_sample_interval_s < 0:
            raise ValueError("cpu sample interval must not be negative")
        if self.cpu_sample_interval_s >= self.collector_timeout_s:
            raise ValueError("cpu sample interval must be shorter than the collector timeout")


def load_config(environ: Mapping[str, str] | None = None) -> HealthConfig:
    """
    Build config from defaults plus environment overrides

    Raises ValueError on malformed values
    """
    env = os.environ if environ is None else environ

    kwargs: dict = {}

    raw_timeout = env.get(TIMEOUT_ENV)
    if raw_timeout:
        try:
            kwargs["collector_timeout_s"] = float(raw_timeout)
        except ValueError:
            raise ValueError(f"{TIMEOUT_ENV} must be a number of seconds, got {raw_timeout!r}") from None

    kwargs["emit_events"] = env.get(EVENTS_ENV) == "1"

    return HealthConfig(**kwargs)
