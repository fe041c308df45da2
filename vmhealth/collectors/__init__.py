"""vmhealth.collectors package exports."""

from vmhealth.collectors.base import (
    CollectionFailure,
    CollectorOutcome,
    Readers,
    collect_metrics,
    run_collector,
)
from vmhealth.collectors.cpu import collect_cpu
from vmhealth.collectors.disk import collect_disk
from vmhealth.collectors.memory import collect_memory

__all__ = [
    "CollectionFailure",
    "CollectorOutcome",
    "Readers",
    "collect_cpu",
    "collect_disk",
    "collect_memory",
    "collect_metrics",
    "run_collector",
]
