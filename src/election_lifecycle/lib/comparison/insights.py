"""Insights summarizer — compare against the most recent completed election.

Picks a baseline from the eligible prior elections, runs the comparison
engine, and reduces the significant trends to messages and an overall
direction.
"""

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime

from election_lifecycle.lib.comparison.metrics import ComparisonResult, TrendDirection, compare
from election_lifecycle.lib.lifecycle.models import Election, ElectionStatus
from election_lifecycle.lib.lifecycle.resolver import resolve_status
from election_lifecycle.lib.lifecycle.temporal import CalendarDate, Instant, as_instant

# Elections with no voting day sort after every dated election
_UNDATED = CalendarDate(year=0, month=0, day=0)


class OverallTrend(enum.StrEnum):
    """Qualitative direction across all significant changes."""

    GROWING = "growing"
    SHRINKING = "shrinking"
    STABLE = "stable"


@dataclass(frozen=True)
class SignificantChange:
    """A metric whose change crossed the significance threshold."""

    metric: str
    direction: TrendDirection
    change: float
    percentage_change: float
    message: str


@dataclass(frozen=True)
class Insights:
    """Summary of how an election compares with its baseline."""

    baseline: Election
    comparison: ComparisonResult
    overall_trend: OverallTrend
    significant_changes: list[SignificantChange] = field(default_factory=list)


def is_eligible_baseline(candidate: Election, current_id: str, now: Instant | datetime | date) -> bool:
    """Whether an election may serve as the comparison baseline.

    It must not be the current election, and must be completed either by
    stored value or, when not cancelled, by resolved status.
    """
    if candidate.id == current_id:
        return False
    if candidate.stored_status == ElectionStatus.COMPLETED:
        return True
    return (
        candidate.stored_status != ElectionStatus.CANCELLED
        and resolve_status(candidate, now) == ElectionStatus.COMPLETED
    )


def _voting_day(election: Election) -> CalendarDate:
    day = election.election_date
    return day if day is not None and day.is_valid else _UNDATED


def order_by_recency(elections: Iterable[Election]) -> list[Election]:
    """Sort elections by voting day, most recent first.

    Ties on the same day are broken by ascending id. Undated elections,
    and those whose voting day is not a real calendar date, come last.
    """
    by_id = sorted(elections, key=lambda e: e.id)
    return sorted(by_id, key=_voting_day, reverse=True)


def eligible_baselines(
    current: Election,
    elections: Iterable[Election],
    now: Instant | datetime | date,
) -> list[Election]:
    """Return eligible baseline elections, most recent first."""
    instant = as_instant(now)
    return order_by_recency(e for e in elections if is_eligible_baseline(e, current.id, instant))


def _metric_label(metric: str) -> str:
    return metric.replace("_", " ")


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):d}"
    return f"{value:.6f}".rstrip("0").rstrip(".")


def describe_change(metric: str, direction: TrendDirection, change: float, percentage_change: float) -> str:
    """Render a significant change as a sentence fragment.

    Example: ``"total candidates increased by 2 (25.0%)"``.
    """
    verb = "increased" if direction == TrendDirection.UP else "decreased"
    return (
        f"{_metric_label(metric)} {verb} by {_format_number(abs(change))} "
        f"({abs(percentage_change):.1f}%)"
    )


def summarize_insights(current: Election, eligible_prior: Iterable[Election]) -> Insights | None:
    """Summarize how an election compares with the most recent eligible one.

    Args:
        current: The election being viewed.
        eligible_prior: Baseline candidates already filtered for eligibility.

    Returns:
        Insights, or None when there is no eligible prior election.
    """
    ordered = order_by_recency(eligible_prior)
    if not ordered:
        return None

    baseline = ordered[0]
    comparison = compare(current, baseline)
    if comparison is None:
        return None

    changes = [
        SignificantChange(
            metric=metric,
            direction=trend.direction,
            change=trend.change,
            percentage_change=trend.percentage_change,
            message=describe_change(metric, trend.direction, trend.change, trend.percentage_change),
        )
        for metric, trend in comparison.significant_trends.items()
    ]

    ups = sum(1 for c in changes if c.direction == TrendDirection.UP)
    downs = sum(1 for c in changes if c.direction == TrendDirection.DOWN)
    if ups > downs:
        overall = OverallTrend.GROWING
    elif downs > ups:
        overall = OverallTrend.SHRINKING
    else:
        overall = OverallTrend.STABLE

    return Insights(
        baseline=baseline,
        comparison=comparison,
        overall_trend=overall,
        significant_changes=changes,
    )
