"""Pydantic v2 schemas for lifecycle endpoints and CLI output.

Request bodies carry the election snapshot in the data store's camelCase
record shape; responses use snake_case.
"""

from pydantic import BaseModel, Field

from election_lifecycle.lib.lifecycle import Election, ElectionStatus

# --- Request schemas ---


class ElectionSnapshotRequest(BaseModel):
    """A snapshot of election records to evaluate."""

    elections: list[Election] = Field(default_factory=list)


class ComparisonRequest(ElectionSnapshotRequest):
    """Compare one election against a baseline from the snapshot."""

    current_id: str = Field(min_length=1)
    baseline_id: str | None = Field(
        default=None,
        min_length=1,
        description="Baseline election ID. Defaults to the most recent eligible election if null.",
    )


class InsightsRequest(ElectionSnapshotRequest):
    """Summarize insights for one election in the snapshot."""

    current_id: str = Field(min_length=1)


# --- Response schemas ---


class ElectionStatusItem(BaseModel):
    """Derived lifecycle status for one election."""

    id: str
    election_name: str | None = None
    stored_status: ElectionStatus | None = None
    status: ElectionStatus
    election_date: str
    polling_hours: str


class ElectionStatsResponse(BaseModel):
    """Per-status counts and the election IDs in each bucket."""

    total_count: int
    active_count: int
    upcoming_count: int
    completed_count: int
    scheduled_count: int
    cancelled_count: int
    buckets: dict[ElectionStatus, list[str]]


class TrendMetricResponse(BaseModel):
    """Change of one metric between baseline and current election."""

    current: float
    previous: float
    change: float
    percentage_change: float
    direction: str
    is_significant: bool


class CandidateSummaryResponse(BaseModel):
    """Candidate enrollment statistics for one election."""

    total_candidates: int
    total_parties: int
    independent_candidates: int
    average_candidates_per_party: float
    parties_with_single_candidate: int
    party_counts: dict[str, int] = Field(default_factory=dict)
    largest_party: str | None = None
    largest_party_count: int = 0


class ComparisonResponse(BaseModel):
    """Trends of the current election against a baseline."""

    current_id: str
    baseline_id: str
    baseline_name: str | None = None
    current_summary: CandidateSummaryResponse
    baseline_summary: CandidateSummaryResponse
    trends: dict[str, TrendMetricResponse]


class SignificantChangeResponse(BaseModel):
    """A metric change above the significance threshold."""

    metric: str
    direction: str
    change: float
    percentage_change: float
    message: str


class InsightsResponse(BaseModel):
    """Insights comparing an election with its most recent eligible baseline."""

    current_id: str
    compared_with_id: str
    compared_with_name: str | None = None
    overall_trend: str
    significant_changes: list[SignificantChangeResponse] = Field(default_factory=list)
