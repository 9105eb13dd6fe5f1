"""Shared test fixtures for election snapshots and instants."""

import pytest

from election_lifecycle.lib.lifecycle import Election, Instant
from tests.factories import at, candidates, make_election


@pytest.fixture
def election() -> Election:
    """The default 2024-06-15 election."""
    return make_election()


@pytest.fixture
def snapshot() -> list[Election]:
    """A mixed snapshot evaluated at 2024-06-15 12:00."""
    return [
        make_election(id="active", enrolledCandidates=candidates("Red", "Red", "Blue", None, "Green")),
        make_election(
            id="completed-2022",
            electionName="General 2022",
            startDate={"year": 2022, "month": 1, "day": 1},
            endDate={"year": 2022, "month": 6, "day": 30},
            electionDate={"year": 2022, "month": 6, "day": 15},
            enrolledCandidates=candidates("Red", "Blue", "Independent", "Green"),
        ),
        make_election(
            id="completed-2023",
            electionName="Special 2023",
            startDate={"year": 2023, "month": 1, "day": 1},
            endDate={"year": 2023, "month": 3, "day": 30},
            electionDate={"year": 2023, "month": 3, "day": 15},
            enrolledCandidates=candidates("Red", "Blue"),
        ),
        make_election(
            id="scheduled",
            startDate={"year": 2025, "month": 1, "day": 1},
            endDate={"year": 2025, "month": 6, "day": 30},
            electionDate={"year": 2025, "month": 6, "day": 15},
        ),
        make_election(
            id="upcoming",
            electionDate={"year": 2024, "month": 6, "day": 20},
        ),
        make_election(
            id="cancelled",
            status="Cancelled",
            startDate={"year": 2021, "month": 1, "day": 1},
            electionDate={"year": 2021, "month": 6, "day": 15},
        ),
    ]


@pytest.fixture
def noon() -> Instant:
    """2024-06-15 12:00, during polling hours of the default election."""
    return at(2024, 6, 15, 12, 0)
