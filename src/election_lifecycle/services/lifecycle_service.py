"""Lifecycle service — derived status, stats, comparison, and insights views.

Every function takes ``now`` from the caller; nothing here reads the clock
or caches a derived status.
"""

from collections.abc import Sequence

from loguru import logger

from election_lifecycle.lib.comparison import (
    CandidateSummary,
    ComparisonResult,
    TrendMetric,
    compare,
    compare_with,
    eligible_baselines,
    summarize_insights,
)
from election_lifecycle.lib.lifecycle import (
    Election,
    Instant,
    aggregate,
    format_calendar_date,
    format_time_of_day,
    resolve_status,
)
from election_lifecycle.schemas.election import (
    CandidateSummaryResponse,
    ComparisonResponse,
    ElectionStatsResponse,
    ElectionStatusItem,
    InsightsResponse,
    SignificantChangeResponse,
    TrendMetricResponse,
)


def find_election(elections: Sequence[Election], election_id: str) -> Election | None:
    """Return the election with ``election_id``, or None."""
    return next((e for e in elections if e.id == election_id), None)


def build_status_item(election: Election, now: Instant) -> ElectionStatusItem:
    return ElectionStatusItem(
        id=election.id,
        election_name=election.election_name,
        stored_status=election.stored_status,
        status=resolve_status(election, now),
        election_date=format_calendar_date(election.election_date),
        polling_hours=f"{format_time_of_day(election.start_time)} - {format_time_of_day(election.end_time)}",
    )


def list_statuses(elections: Sequence[Election], now: Instant) -> list[ElectionStatusItem]:
    """Resolve the status of every election in the snapshot."""
    return [build_status_item(e, now) for e in elections]


def build_stats(elections: Sequence[Election], now: Instant) -> ElectionStatsResponse:
    """Aggregate per-status counts for a snapshot.

    Args:
        elections: Election snapshot.
        now: Current instant.

    Returns:
        ElectionStatsResponse with counts and bucketed election IDs.
    """
    stats = aggregate(elections, now)
    logger.debug(
        "Aggregated {} election(s): {} active, {} upcoming, {} completed, {} scheduled, {} cancelled",
        stats.total_count,
        stats.active_count,
        stats.upcoming_count,
        stats.completed_count,
        stats.scheduled_count,
        stats.cancelled_count,
    )
    return ElectionStatsResponse(
        total_count=stats.total_count,
        active_count=stats.active_count,
        upcoming_count=stats.upcoming_count,
        completed_count=stats.completed_count,
        scheduled_count=stats.scheduled_count,
        cancelled_count=stats.cancelled_count,
        buckets={status: [e.id for e in bucket] for status, bucket in stats.by_status.items()},
    )


def _summary_response(summary: CandidateSummary) -> CandidateSummaryResponse:
    largest_name, largest_count = summary.largest_party or (None, 0)
    return CandidateSummaryResponse(
        total_candidates=summary.total_candidates,
        total_parties=summary.total_parties,
        independent_candidates=summary.independent_candidates,
        average_candidates_per_party=summary.average_candidates_per_party,
        parties_with_single_candidate=summary.parties_with_single_candidate,
        party_counts=dict(summary.party_counts),
        largest_party=largest_name,
        largest_party_count=largest_count,
    )


def _trend_response(trend: TrendMetric) -> TrendMetricResponse:
    return TrendMetricResponse(
        current=trend.current,
        previous=trend.previous,
        change=trend.change,
        percentage_change=trend.percentage_change,
        direction=trend.direction.value,
        is_significant=trend.is_significant,
    )


def comparison_response(result: ComparisonResult) -> ComparisonResponse:
    return ComparisonResponse(
        current_id=result.current.id,
        baseline_id=result.baseline.id,
        baseline_name=result.baseline.election_name,
        current_summary=_summary_response(result.current_summary),
        baseline_summary=_summary_response(result.baseline_summary),
        trends={name: _trend_response(trend) for name, trend in result.trends.items()},
    )


def build_comparison(
    current: Election,
    elections: Sequence[Election],
    now: Instant,
    baseline_id: str | None = None,
) -> ComparisonResponse | None:
    """Compare an election against a baseline drawn from the eligible pool.

    Args:
        current: The election being viewed.
        elections: Full snapshot; the baseline pool is filtered from it.
        now: Current instant, used to decide which elections are completed.
        baseline_id: Specific baseline to use. Defaults to the most recent
            eligible election.

    Returns:
        ComparisonResponse, or None when no eligible baseline matches.
    """
    pool = eligible_baselines(current, elections, now)
    if baseline_id is not None:
        result = compare_with(current, baseline_id, pool)
    else:
        result = compare(current, pool[0] if pool else None)

    if result is None:
        logger.info("No comparison baseline available for election {}", current.id)
        return None
    return comparison_response(result)


def build_insights(current: Election, elections: Sequence[Election], now: Instant) -> InsightsResponse | None:
    """Summarize insights against the most recent eligible baseline.

    Returns:
        InsightsResponse, or None when no prior completed election exists.
    """
    insights = summarize_insights(current, eligible_baselines(current, elections, now))
    if insights is None:
        logger.info("No prior completed election to compare with {}", current.id)
        return None

    return InsightsResponse(
        current_id=current.id,
        compared_with_id=insights.baseline.id,
        compared_with_name=insights.baseline.election_name,
        overall_trend=insights.overall_trend.value,
        significant_changes=[
            SignificantChangeResponse(
                metric=change.metric,
                direction=change.direction.value,
                change=change.change,
                percentage_change=change.percentage_change,
                message=change.message,
            )
            for change in insights.significant_changes
        ],
    )
