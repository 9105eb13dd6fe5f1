"""Tests for the lifecycle service views."""

from election_lifecycle.lib.lifecycle import Election, ElectionStatus, Instant
from election_lifecycle.services import lifecycle_service
from tests.factories import candidates, make_election


class TestListStatuses:
    """Tests for list_statuses."""

    def test_status_items(self, snapshot: list[Election], noon: Instant) -> None:
        items = lifecycle_service.list_statuses(snapshot, noon)
        by_id = {item.id: item for item in items}
        assert by_id["active"].status == ElectionStatus.ACTIVE
        assert by_id["active"].stored_status == ElectionStatus.SCHEDULED
        assert by_id["active"].election_date == "15/6/2024"
        assert by_id["active"].polling_hours == "07:00 - 17:00"
        assert by_id["cancelled"].status == ElectionStatus.CANCELLED

    def test_missing_fields_are_formatted(self, noon: Instant) -> None:
        election = make_election(electionDate=None, startTime=None, endTime=None)
        item = lifecycle_service.build_status_item(election, noon)
        assert item.election_date == "Date not set"
        assert item.polling_hours == "N/A - N/A"


class TestBuildStats:
    """Tests for build_stats."""

    def test_counts_and_buckets(self, snapshot: list[Election], noon: Instant) -> None:
        stats = lifecycle_service.build_stats(snapshot, noon)
        assert stats.total_count == 6
        assert stats.completed_count == 2
        assert stats.buckets[ElectionStatus.COMPLETED] == ["completed-2022", "completed-2023"]
        assert stats.buckets[ElectionStatus.ACTIVE] == ["active"]
        assert stats.buckets[ElectionStatus.CANCELLED] == ["cancelled"]


class TestBuildComparison:
    """Tests for build_comparison."""

    def test_defaults_to_most_recent_baseline(self, snapshot: list[Election], noon: Instant) -> None:
        result = lifecycle_service.build_comparison(snapshot[0], snapshot, noon)
        assert result is not None
        assert result.baseline_id == "completed-2023"
        assert result.current_summary.largest_party == "Red"
        assert result.current_summary.largest_party_count == 2
        assert result.trends["total_candidates"].change == 3
        assert result.trends["total_candidates"].direction == "up"

    def test_explicit_baseline(self, snapshot: list[Election], noon: Instant) -> None:
        result = lifecycle_service.build_comparison(snapshot[0], snapshot, noon, baseline_id="completed-2022")
        assert result is not None
        assert result.baseline_name == "General 2022"
        assert result.baseline_summary.independent_candidates == 1

    def test_ineligible_baseline_returns_none(self, snapshot: list[Election], noon: Instant) -> None:
        assert lifecycle_service.build_comparison(snapshot[0], snapshot, noon, baseline_id="upcoming") is None
        assert lifecycle_service.build_comparison(snapshot[0], snapshot, noon, baseline_id="cancelled") is None

    def test_no_eligible_baseline(self, noon: Instant) -> None:
        current = make_election(id="only", enrolledCandidates=candidates("Red"))
        assert lifecycle_service.build_comparison(current, [current], noon) is None


class TestBuildInsights:
    """Tests for build_insights."""

    def test_insights(self, snapshot: list[Election], noon: Instant) -> None:
        result = lifecycle_service.build_insights(snapshot[0], snapshot, noon)
        assert result is not None
        assert result.compared_with_id == "completed-2023"
        assert result.compared_with_name == "Special 2023"
        assert result.overall_trend == "growing"
        assert len(result.significant_changes) == 3
        assert result.significant_changes[0].metric == "total_candidates"

    def test_no_prior_election(self, noon: Instant) -> None:
        current = make_election(id="only")
        assert lifecycle_service.build_insights(current, [current], noon) is None

    def test_find_election(self, snapshot: list[Election]) -> None:
        assert lifecycle_service.find_election(snapshot, "scheduled") is snapshot[3]
        assert lifecycle_service.find_election(snapshot, "missing") is None
