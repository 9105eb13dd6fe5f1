"""CLI commands for evaluating election snapshots.

Reads a JSON snapshot of election records and prints derived statuses,
per-status counts, or comparison insights.
"""

from datetime import datetime
from pathlib import Path
from typing import Annotated

import typer

from election_lifecycle.lib.lifecycle import Election, Instant

SnapshotArg = Annotated[
    Path | None,
    typer.Argument(help="Election snapshot JSON file (defaults to SNAPSHOT_PATH)"),
]
NowOption = Annotated[
    str | None,
    typer.Option("--now", help="Evaluate at this local time (ISO 8601) instead of the current time"),
]


def _resolve_now(now: str | None) -> Instant:
    """Parse ``--now`` or sample the wall clock once."""
    if now is None:
        return Instant.from_datetime(datetime.now())  # noqa: DTZ005
    try:
        return Instant.from_datetime(datetime.fromisoformat(now))
    except ValueError as e:
        typer.echo(f"Error: Invalid --now value: {now}", err=True)
        raise typer.Exit(code=1) from e


def _load(snapshot: Path | None) -> list[Election]:
    """Load the snapshot, exiting with code 1 on failure."""
    from election_lifecycle.core.config import get_settings
    from election_lifecycle.services.snapshot_service import SnapshotError, load_snapshot

    path = snapshot or get_settings().snapshot_path
    if path is None:
        typer.echo("Error: No snapshot file given and SNAPSHOT_PATH is not set", err=True)
        raise typer.Exit(code=1)
    try:
        return load_snapshot(path)
    except SnapshotError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


def status(snapshot: SnapshotArg = None, now: NowOption = None) -> None:
    """Show the derived lifecycle status of each election."""
    from election_lifecycle.services import lifecycle_service

    instant = _resolve_now(now)
    items = lifecycle_service.list_statuses(_load(snapshot), instant)
    if not items:
        typer.echo("No elections in snapshot.")
        return

    typer.echo(f"{'ID':<12} {'Name':<32} {'Stored':<10} {'Status':<10} {'Date':<12} Hours")
    for item in items:
        stored = item.stored_status.value if item.stored_status else "-"
        name = (item.election_name or "")[:32]
        typer.echo(
            f"{item.id:<12} {name:<32} {stored:<10} {item.status.value:<10} {item.election_date:<12} {item.polling_hours}"
        )


def stats(snapshot: SnapshotArg = None, now: NowOption = None) -> None:
    """Count elections per derived lifecycle status."""
    from election_lifecycle.services import lifecycle_service

    instant = _resolve_now(now)
    result = lifecycle_service.build_stats(_load(snapshot), instant)
    typer.echo(f"Total:      {result.total_count}")
    typer.echo(f"  Active:     {result.active_count}")
    typer.echo(f"  Upcoming:   {result.upcoming_count}")
    typer.echo(f"  Scheduled:  {result.scheduled_count}")
    typer.echo(f"  Completed:  {result.completed_count}")
    typer.echo(f"  Cancelled:  {result.cancelled_count}")


def insights(
    election_id: Annotated[str, typer.Option("--election-id", help="Election to summarize")],
    snapshot: SnapshotArg = None,
    now: NowOption = None,
) -> None:
    """Compare an election with the most recent completed election."""
    from election_lifecycle.services import lifecycle_service

    instant = _resolve_now(now)
    elections = _load(snapshot)
    current = lifecycle_service.find_election(elections, election_id)
    if current is None:
        typer.echo(f"Error: Election {election_id} not found in snapshot", err=True)
        raise typer.Exit(code=1)

    result = lifecycle_service.build_insights(current, elections, instant)
    if result is None:
        typer.echo("No completed prior election available for comparison.")
        return

    typer.echo(f"Compared with: {result.compared_with_name or result.compared_with_id}")
    typer.echo(f"Overall trend: {result.overall_trend}")
    if not result.significant_changes:
        typer.echo("No significant changes.")
    for change in result.significant_changes:
        typer.echo(f"  - {change.message}")
