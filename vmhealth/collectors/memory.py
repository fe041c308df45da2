"""
vmhealth.collectors.memory

Memory collector
- Linux via /proc/meminfo
- used = MemTotal - MemAvailable (reclaimable caches count as free)
- stdlib only
"""

from __future__ import annotations

from pathlib import Path


PROC_MEMINFO = Path("/proc/meminfo")


def _parse_meminfo(contents: str) -> dict[str, int]:
    """
    Parse /proc/meminfo into a dict of values in bytes
    """
    values: dict[str, int] = {}
    for line in contents.splitlines():
        parts = line.split()
        if len(parts) < 2:
            continue
        key = parts[0].rstrip(":")
        try:
            value_kb = int(parts[1])
        except ValueError:
            continue
        values[key] = value_kb * 1024
    return values


def memory_percent(total: int, available: int) -> int:
    """
    Used share of memory, rounded to the nearest whole percentage
    """
    if total <= 0:
        raise RuntimeError("MemTotal must be positive")
    return round((total - available) / total * 100)


def collect_memory(meminfo_path: Path | None = None) -> int:
    """
    Collect memory utilization from /proc/meminfo
    """
    path = meminfo_path or PROC_MEMINFO
    if not path.exists():
        raise RuntimeError(f"{path} not available on this platform")

    values = _parse_meminfo(path.read_text(encoding="utf-8"))

    mem_total = values.get("MemTotal")
    mem_available = values.get("MemAvailable")

    if mem_total is None or mem_available is None:
        raise RuntimeError(f"MemAvailable or MemTotal missing in {path}")

    return memory_percent(mem_total, mem_available)
