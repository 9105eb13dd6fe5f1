"""Stats aggregator — partition elections by resolved lifecycle status."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime

from loguru import logger

from election_lifecycle.lib.lifecycle.models import Election, ElectionStatus
from election_lifecycle.lib.lifecycle.resolver import resolve_status
from election_lifecycle.lib.lifecycle.temporal import Instant, as_instant


@dataclass
class ElectionStats:
    """Elections bucketed by resolved status, in input order within each bucket."""

    active: list[Election] = field(default_factory=list)
    upcoming: list[Election] = field(default_factory=list)
    completed: list[Election] = field(default_factory=list)
    scheduled: list[Election] = field(default_factory=list)
    cancelled: list[Election] = field(default_factory=list)
    statuses: dict[str, ElectionStatus] = field(default_factory=dict)

    @property
    def by_status(self) -> dict[ElectionStatus, list[Election]]:
        return {
            ElectionStatus.ACTIVE: self.active,
            ElectionStatus.UPCOMING: self.upcoming,
            ElectionStatus.COMPLETED: self.completed,
            ElectionStatus.SCHEDULED: self.scheduled,
            ElectionStatus.CANCELLED: self.cancelled,
        }

    @property
    def total_count(self) -> int:
        return sum(len(bucket) for bucket in self.by_status.values())

    @property
    def active_count(self) -> int:
        return len(self.active)

    @property
    def upcoming_count(self) -> int:
        return len(self.upcoming)

    @property
    def completed_count(self) -> int:
        return len(self.completed)

    @property
    def scheduled_count(self) -> int:
        return len(self.scheduled)

    @property
    def cancelled_count(self) -> int:
        return len(self.cancelled)

    def status_of(self, election_id: str) -> ElectionStatus | None:
        """Return the status resolved for an election during aggregation.

        When several records share an id, the first one seen wins.
        """
        return self.statuses.get(election_id)


def aggregate(elections: Iterable[Election], now: Instant | datetime | date) -> ElectionStats:
    """Partition elections into status buckets in a single pass.

    Each election is resolved exactly once against the same ``now``.
    Records sharing an id are all bucketed, but ``status_of`` keeps the
    status of the first one.

    Args:
        elections: Election snapshots.
        now: The current instant, sampled once by the caller.

    Returns:
        ElectionStats with five stable buckets and derived counts.
    """
    current = as_instant(now)
    stats = ElectionStats()
    buckets = stats.by_status
    for election in elections:
        status = resolve_status(election, current)
        buckets[status].append(election)
        if election.id in stats.statuses:
            logger.warning("Duplicate election id {} in snapshot, keeping first status", election.id)
        else:
            stats.statuses[election.id] = status
    return stats
