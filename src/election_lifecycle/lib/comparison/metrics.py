"""Comparison engine — candidate-enrollment trends between two elections.

Both elections are reduced to the same summary statistics, then each
metric becomes a TrendMetric carrying the absolute and percentage change.
"""

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from election_lifecycle.lib.lifecycle.models import INDEPENDENT, Election

# A change is significant when its absolute percentage exceeds this value
SIGNIFICANCE_THRESHOLD = 20.0

METRIC_NAMES: tuple[str, ...] = (
    "total_candidates",
    "total_parties",
    "average_candidates_per_party",
    "independent_candidates",
    "parties_with_single_candidate",
)


class TrendDirection(enum.StrEnum):
    """Direction of a metric between the previous and current election."""

    UP = "up"
    DOWN = "down"
    SAME = "same"


@dataclass(frozen=True)
class CandidateSummary:
    """Enrollment statistics for a single election."""

    total_candidates: int
    total_parties: int
    independent_candidates: int
    average_candidates_per_party: float
    parties_with_single_candidate: int
    party_counts: dict[str, int]
    largest_party: tuple[str, int] | None


@dataclass(frozen=True)
class TrendMetric:
    """Change of one metric from the previous to the current election."""

    current: float
    previous: float
    change: float
    percentage_change: float
    direction: TrendDirection
    is_significant: bool


@dataclass(frozen=True)
class ComparisonResult:
    """Per-metric trends of ``current`` against a ``baseline`` election."""

    current: Election
    baseline: Election
    current_summary: CandidateSummary
    baseline_summary: CandidateSummary
    trends: dict[str, TrendMetric]

    @property
    def significant_trends(self) -> dict[str, TrendMetric]:
        return {name: trend for name, trend in self.trends.items() if trend.is_significant}


def summarize_candidates(election: Election) -> CandidateSummary:
    """Compute enrollment statistics for an election.

    Candidates with no party, a blank party, or the literal party
    ``Independent`` are counted as independents and do not form a party.

    Args:
        election: The election snapshot.

    Returns:
        CandidateSummary for the election.
    """
    candidates = election.enrolled_candidates
    independents = 0
    party_counts: dict[str, int] = {}
    for candidate in candidates:
        party = candidate.normalized_party
        if party == INDEPENDENT:
            independents += 1
        else:
            party_counts[party] = party_counts.get(party, 0) + 1

    total_parties = len(party_counts)
    in_parties = len(candidates) - independents

    largest_party: tuple[str, int] | None = None
    for name, count in party_counts.items():
        if largest_party is None or count > largest_party[1]:
            largest_party = (name, count)

    return CandidateSummary(
        total_candidates=len(candidates),
        total_parties=total_parties,
        independent_candidates=independents,
        average_candidates_per_party=in_parties / total_parties if total_parties > 0 else 0,
        parties_with_single_candidate=sum(1 for count in party_counts.values() if count == 1),
        party_counts=party_counts,
        largest_party=largest_party,
    )


def build_trend(current: float, previous: float) -> TrendMetric:
    """Build a TrendMetric for one metric.

    Percentage change is 0 when the previous value is not positive.
    """
    change = current - previous
    percentage_change = change * 100 / previous if previous > 0 else 0.0
    if change > 0:
        direction = TrendDirection.UP
    elif change < 0:
        direction = TrendDirection.DOWN
    else:
        direction = TrendDirection.SAME
    return TrendMetric(
        current=current,
        previous=previous,
        change=change,
        percentage_change=percentage_change,
        direction=direction,
        is_significant=abs(percentage_change) > SIGNIFICANCE_THRESHOLD,
    )


def compare(current: Election, previous: Election | None) -> ComparisonResult | None:
    """Compare the candidate enrollment of two elections.

    Args:
        current: The election being viewed.
        previous: The baseline election, or None if none could be resolved.

    Returns:
        ComparisonResult with one trend per metric, or None without a baseline.
    """
    if previous is None:
        return None

    current_summary = summarize_candidates(current)
    baseline_summary = summarize_candidates(previous)
    trends = {
        name: build_trend(getattr(current_summary, name), getattr(baseline_summary, name))
        for name in METRIC_NAMES
    }
    return ComparisonResult(
        current=current,
        baseline=previous,
        current_summary=current_summary,
        baseline_summary=baseline_summary,
        trends=trends,
    )


def compare_with(
    current: Election,
    baseline_id: str,
    pool: Iterable[Election],
) -> ComparisonResult | None:
    """Compare against the election with ``baseline_id`` in a candidate pool.

    Returns None when the id is not in the pool.
    """
    baseline = next((e for e in pool if e.id == baseline_id), None)
    return compare(current, baseline)
