"""Election lifecycle API endpoints.

POST /lifecycle/statuses — derived status per election
POST /lifecycle/stats — per-status counts and buckets
POST /lifecycle/comparison — trends against a baseline election
POST /lifecycle/insights — significant changes and overall direction

Endpoints are stateless: the request body carries the election snapshot.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from election_lifecycle.core.dependencies import get_current_instant
from election_lifecycle.lib.lifecycle import Election, Instant
from election_lifecycle.schemas.election import (
    ComparisonRequest,
    ComparisonResponse,
    ElectionSnapshotRequest,
    ElectionStatsResponse,
    ElectionStatusItem,
    InsightsRequest,
    InsightsResponse,
)
from election_lifecycle.services import lifecycle_service

lifecycle_router = APIRouter(prefix="/lifecycle", tags=["lifecycle"])


def _require_election(elections: list[Election], election_id: str) -> Election:
    election = lifecycle_service.find_election(elections, election_id)
    if election is None:
        raise HTTPException(status_code=404, detail="Election not found.")
    return election


@lifecycle_router.post("/statuses", response_model=list[ElectionStatusItem])
async def list_statuses(
    request: ElectionSnapshotRequest,
    now: Annotated[Instant, Depends(get_current_instant)],
) -> list[ElectionStatusItem]:
    """Resolve the lifecycle status of every election in the snapshot."""
    return lifecycle_service.list_statuses(request.elections, now)


@lifecycle_router.post("/stats", response_model=ElectionStatsResponse)
async def get_stats(
    request: ElectionSnapshotRequest,
    now: Annotated[Instant, Depends(get_current_instant)],
) -> ElectionStatsResponse:
    """Count elections per derived status."""
    return lifecycle_service.build_stats(request.elections, now)


@lifecycle_router.post("/comparison", response_model=ComparisonResponse | None)
async def get_comparison(
    request: ComparisonRequest,
    now: Annotated[Instant, Depends(get_current_instant)],
) -> ComparisonResponse | None:
    """Compare an election with a baseline. Returns null when no baseline is eligible."""
    current = _require_election(request.elections, request.current_id)
    return lifecycle_service.build_comparison(current, request.elections, now, baseline_id=request.baseline_id)


@lifecycle_router.post("/insights", response_model=InsightsResponse | None)
async def get_insights(
    request: InsightsRequest,
    now: Annotated[Instant, Depends(get_current_instant)],
) -> InsightsResponse | None:
    """Summarize insights for an election. Returns null when there is no prior election."""
    current = _require_election(request.elections, request.current_id)
    return lifecycle_service.build_insights(current, request.elections, now)
