"""
vmhealth.collectors.base

Light result wrapper -> prevent collector errors from crashing the check
- every collector runs under a bounded wait
- failures are returned as data, never raised
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from vmhealth.model import Metrics


class CpuReader(Protocol):
    def __call__(self) -> int: ...


class MemoryReader(Protocol):
    def __call__(self) -> int: ...


class DiskReader(Protocol):
    def __call__(self) -> int: ...


@dataclass(frozen=True)
class Readers:
    """
    The three OS introspection capabilities, swappable for fakes in tests
    """

    cpu: CpuReader
    memory: MemoryReader
    disk: DiskReader


@dataclass(frozen=True)
class CollectorOutcome:
    """
    Normalized collector result
    - ok: false=failure, error details in error fields
    - value: collector result if ok=true
    """

    name: str
    ok: bool
    value: Optional[Any] = None
    error_type: Optional[str] = None
    error_message: Optional[str] = None


class CollectionFailure(RuntimeError):
    """
    One or more collectors did not yield a valid percentage
    """

    def __init__(self, failures: list[CollectorOutcome]) -> None:
        self.failures = list(failures)
        names = ", ".join(outcome.name for outcome in self.failures)
        super().__init__(f"metric collection failed: {names}")


def _invoke(name: str, fn, args, kwargs) -> CollectorOutcome:
    try:
        v = fn(*args, **kwargs)
        return CollectorOutcome(name=name, ok=True, value=v, error_type=None, error_message=None)
    except Exception as e:
        return CollectorOutcome(
            name=name,
            ok=False,
            value=None,
            error_type=type(e).__name__,
            error_message=str(e),
        )


def run_collector(name: str, fn, *args, timeout_s: float | None = None, **kwargs) -> CollectorOutcome:
    """
    Run collector & collect failure as data

    With timeout_s set, the collector runs in a daemon thread and is
    abandoned once the wait expires (a hung thread never blocks exit)
    """
    if timeout_s is None:
        return _invoke(name, fn, args, kwargs)

    results: list[CollectorOutcome] = []

    def _target() -> None:
        results.append(_invoke(name, fn, args, kwargs))

    worker = threading.Thread(target=_target, name=f"collector-{name}", daemon=True)
    worker.start()
    worker.join(timeout_s)

    if worker.is_alive() or not results:
        return CollectorOutcome(
            name=name,
            ok=False,
            value=None,
            error_type="TimeoutError",
            error_message=f"no result within {timeout_s:g}s",
        )
    return results[0]


def require_percentage(outcome: CollectorOutcome) -> CollectorOutcome:
    """
    Downgrade an ok outcome whose value is not a non-negative integer
    """
    if not outcome.ok:
        return outcome

    value = outcome.value
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return outcome

    return CollectorOutcome(
        name=outcome.name,
        ok=False,
        value=None,
        error_type="InvalidMetric",
        error_message=f"expected a non-negative integer percentage, got {value!r}",
    )


def collect_metrics(readers: Readers, *, timeout_s: float | None = None) -> Metrics:
    """
    Run all three collectors and assemble Metrics

    Every collector is attempted even if an earlier one failed, so the
    failure carries the complete picture

    Raises CollectionFailure if any outcome is not a valid percentage
    """
    outcomes = [
        require_percentage(run_collector("cpu", readers.cpu, timeout_s=timeout_s)),
        require_percentage(run_collector("memory", readers.memory, timeout_s=timeout_s)),
        require_percentage(run_collector("disk", readers.disk, timeout_s=timeout_s)),
    ]

    failures = [outcome for outcome in outcomes if not outcome.ok]
    if failures:
        raise CollectionFailure(failures)

    cpu, memory, disk = (outcome.value for outcome in outcomes)
    return Metrics(cpu=cpu, memory=memory, disk=disk)
