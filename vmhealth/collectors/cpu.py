"""
vmhealth.collectors.cpu

CPU collector
- single short sample of aggregate processor times via psutil
- utilization = 100 - idle, truncated to a whole percentage
"""

from __future__ import annotations

import psutil

CPU_SAMPLE_INTERVAL_S = 0.1


def cpu_percent_from_idle(idle: float) -> int:
    """
    Convert an idle percentage into a whole utilization percentage

    Truncates (does not round) and clamps to [0, 100]
    """
    busy = int(100 - idle)
    return max(0, min(100, busy))


def collect_cpu(interval_s: float = CPU_SAMPLE_INTERVAL_S) -> int:
    """
    Collect instantaneous CPU utilization

    One short sample window; the figure is a snapshot, not an average
    """
    times = psutil.cpu_times_percent(interval=interval_s)
    idle = getattr(times, "idle", None)
    if idle is None:
        raise RuntimeError("idle time not reported by the platform")
    return cpu_percent_from_idle(idle)
