"""
vmhealth.main
------------

Point-in-time VM health check.

Key contract:
- `vm-health-check` prints status + metrics; exit 0 if healthy, 1 otherwise
- `vm-health-check explain` adds reasons and recommendations
- any other argument prints usage and exits 1 without collecting anything
- collection failure prints an error on stderr and exits 1
"""

from __future__ import annotations

from functools import partial
from typing import Sequence, TextIO

import typer

from vmhealth.collectors.base import CollectionFailure, Readers, collect_metrics
from vmhealth.collectors.cpu import collect_cpu
from vmhealth.collectors.disk import collect_disk
from vmhealth.collectors.memory import collect_memory
from vmhealth.config import HealthConfig, load_config
from vmhealth.evaluate import evaluate_health
from vmhealth.logging import emit_event
from vmhealth.model import HealthVerdict
from vmhealth.render import get_renderer

PROG_NAME = "vm-health-check"
TOOL_VERSION = "0.1.0"

EXIT_HEALTHY = 0
EXIT_NOT_HEALTHY = 1

MODE_PLAIN = "plain"
MODE_EXPLAIN = "explain"

app = typer.Typer(
    add_completion=False,
    help=f"{PROG_NAME}: report VM health from CPU, memory and disk usage",
)


class UsageError(ValueError):
    """Unrecognized invocation argument"""


def usage_text() -> str:
    return "\n".join(
        [
            f"Usage: {PROG_NAME} [explain]",
            "",
            "Arguments:",
            "  explain    Show detailed explanation of health status",
            "",
            "Examples:",
            f"  {PROG_NAME}              # Display basic health status",
            f"  {PROG_NAME} explain      # Display health status with explanation",
        ]
    )


def parse_mode(args: Sequence[str]) -> str:
    """
    Resolve the report mode from positional arguments

    Only the first token decides; anything after it is ignored
    Raises UsageError when the first token is not `explain`
    """
    if not args:
        return MODE_PLAIN
    if args[0] == MODE_EXPLAIN:
        return MODE_EXPLAIN
    raise UsageError(f"unrecognized arguments: {' '.join(args)}")


def default_readers(config: HealthConfig) -> Readers:
    """
    Bind the real OS collectors to the configured sample window and mount
    """
    return Readers(
        cpu=partial(collect_cpu, config.cpu_sample_interval_s),
        memory=collect_memory,
        disk=partial(collect_disk, config.mount_point),
    )


def exit_code_for(verdict: HealthVerdict) -> int:
    return EXIT_HEALTHY if verdict.healthy else EXIT_NOT_HEALTHY


def run_check(
    args: Sequence[str],
    *,
    readers: Readers | None = None,
    config: HealthConfig | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """
    Parse -> collect -> evaluate -> render, returning the exit code

    out/err default to the process streams
    """
    if config is None:
        config = HealthConfig()

    def _event(event_type: str, **fields) -> None:
        if config.emit_events:
            emit_event(event_type, tool_version=TOOL_VERSION, stream=err, **fields)

    try:
        mode = parse_mode(args)
    except UsageError as e:
        _event("usage_error", message=str(e))
        typer.echo(usage_text(), file=out)
        return EXIT_NOT_HEALTHY

    _event("check_start", mode=mode, threshold=config.threshold, mount_point=config.mount_point)

    try:
        typer.echo("Analyzing VM health...", file=err, err=True)

        if readers is None:
            readers = default_readers(config)

        try:
            metrics = collect_metrics(readers, timeout_s=config.collector_timeout_s)
        except CollectionFailure as e:
            typer.echo("Error: Failed to collect system metrics", file=err, err=True)
            for failure in e.failures:
                typer.echo(
                    f"  {failure.name}: {failure.error_type}: {failure.error_message}",
                    file=err,
                    err=True,
                )
                _event(
                    "collector_failed",
                    collector=failure.name,
                    error_type=failure.error_type,
                    message=failure.error_message,
                )
            return EXIT_NOT_HEALTHY

        verdict = evaluate_health(metrics, config.threshold)
        _event(
            "health_evaluated",
            health=verdict.status.value,
            cpu=metrics.cpu,
            memory=metrics.memory,
            disk=metrics.disk,
            reasons=[violation.reason for violation in verdict.violations],
        )

        renderer = get_renderer(mode)
        # echo strips the status color when out is not a terminal
        typer.echo(
            renderer.render(metrics, verdict, meta={"threshold": config.threshold, "color": True}),
            file=out,
        )
        return exit_code_for(verdict)

    finally:
        _event("check_shutdown", mode=mode)


# -----------------------------
# CLI COMMAND
# -----------------------------
@app.command(context_settings={"ignore_unknown_options": True})
def check(
    args: list[str] | None = typer.Argument(
        None,
        metavar="[explain]",
        help="Pass `explain` to show reasons and recommendations.",
        show_default=False,
    ),
) -> None:
    """
    Evaluate CPU, memory and disk usage against the health threshold
    """
    try:
        config = load_config()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_NOT_HEALTHY)

    raise typer.Exit(code=run_check(args or [], config=config))


if __name__ == "__main__":
    app()
