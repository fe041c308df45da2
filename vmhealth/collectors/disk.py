"""
vmhealth.collectors.disk

Disk collector
- Uses shutil.disk_usage for the configured mount point
- Reports the same "Use%" figure df prints
- stdlib only
"""

from __future__ import annotations

import math
import shutil


def disk_percent(used: int, free: int) -> int:
    """
    df-style usage: used / (used + available to users), rounded up
    """
    capacity = used + free
    if capacity <= 0:
        raise RuntimeError("filesystem reports zero usable capacity")
    return math.ceil(used * 100 / capacity)


def collect_disk(path: str = "/") -> int:
    """
    Collect disk utilization for a given mount point
    """
    usage = shutil.disk_usage(path)
    return disk_percent(usage.used, usage.free)
