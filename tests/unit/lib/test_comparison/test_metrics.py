"""Tests for the candidate-enrollment comparison engine."""

import math

import pytest

from election_lifecycle.lib.comparison import (
    METRIC_NAMES,
    TrendDirection,
    build_trend,
    compare,
    compare_with,
    summarize_candidates,
)
from tests.factories import candidates, make_election


class TestSummarizeCandidates:
    """Tests for summarize_candidates."""

    def test_mixed_parties(self) -> None:
        election = make_election(enrolledCandidates=candidates("Red", "Red", "Blue", None, "Green", "Independent"))
        summary = summarize_candidates(election)
        assert summary.total_candidates == 6
        assert summary.total_parties == 3
        assert summary.independent_candidates == 2
        assert summary.average_candidates_per_party == pytest.approx(4 / 3)
        assert summary.parties_with_single_candidate == 2
        assert summary.party_counts == {"Red": 2, "Blue": 1, "Green": 1}
        assert summary.largest_party == ("Red", 2)

    def test_all_independent(self) -> None:
        election = make_election(enrolledCandidates=candidates("Independent", None, ""))
        summary = summarize_candidates(election)
        assert summary.total_parties == 0
        assert summary.independent_candidates == 3
        assert summary.independent_candidates == summary.total_candidates
        assert summary.average_candidates_per_party == 0
        assert summary.largest_party is None

    def test_no_candidates(self) -> None:
        summary = summarize_candidates(make_election())
        assert summary.total_candidates == 0
        assert summary.total_parties == 0
        assert summary.average_candidates_per_party == 0
        assert math.isfinite(summary.average_candidates_per_party)

    def test_largest_party_tie_keeps_first_seen(self) -> None:
        election = make_election(enrolledCandidates=candidates("Blue", "Red", "Red", "Blue"))
        assert summarize_candidates(election).largest_party == ("Blue", 2)


class TestBuildTrend:
    """Tests for build_trend."""

    def test_twenty_percent_is_not_significant(self) -> None:
        trend = build_trend(12, 10)
        assert trend.change == 2
        assert trend.percentage_change == 20.0
        assert trend.direction == TrendDirection.UP
        assert trend.is_significant is False

    def test_above_threshold_is_significant(self) -> None:
        trend = build_trend(13, 10)
        assert trend.percentage_change == pytest.approx(30.0)
        assert trend.is_significant is True

    def test_decrease(self) -> None:
        trend = build_trend(5, 10)
        assert trend.change == -5
        assert trend.percentage_change == -50.0
        assert trend.direction == TrendDirection.DOWN
        assert trend.is_significant is True

    def test_unchanged(self) -> None:
        trend = build_trend(4, 4)
        assert trend.direction == TrendDirection.SAME
        assert trend.percentage_change == 0
        assert trend.is_significant is False

    def test_zero_previous_has_zero_percentage(self) -> None:
        trend = build_trend(3, 0)
        assert trend.change == 3
        assert trend.percentage_change == 0
        assert trend.direction == TrendDirection.UP
        assert trend.is_significant is False


class TestCompare:
    """Tests for compare and compare_with."""

    def test_trends_for_every_metric(self) -> None:
        current = make_election(id="cur", enrolledCandidates=candidates(*["Red"] * 12))
        previous = make_election(id="prev", enrolledCandidates=candidates(*["Red"] * 10))
        result = compare(current, previous)
        assert result is not None
        assert tuple(result.trends) == METRIC_NAMES
        total = result.trends["total_candidates"]
        assert (total.current, total.previous, total.change) == (12, 10, 2)
        assert total.percentage_change == 20.0
        assert total.is_significant is False
        assert result.trends["average_candidates_per_party"].change == 2
        assert result.significant_trends == {}

    def test_no_previous_returns_none(self) -> None:
        assert compare(make_election(), None) is None

    def test_compare_with_known_id(self) -> None:
        current = make_election(id="cur", enrolledCandidates=candidates("Red"))
        pool = [make_election(id="a"), make_election(id="b", enrolledCandidates=candidates("Red", "Blue"))]
        result = compare_with(current, "b", pool)
        assert result is not None
        assert result.baseline.id == "b"
        assert result.trends["total_parties"].direction == TrendDirection.DOWN

    def test_compare_with_unknown_id_returns_none(self) -> None:
        assert compare_with(make_election(id="cur"), "zzz", [make_election(id="a")]) is None
