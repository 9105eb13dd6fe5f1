"""Lifecycle library — derive election status from date boundaries.

Public API:
    - resolve_status: Lifecycle status of one election at an instant
    - aggregate: Partition elections into per-status buckets and counts
    - Election, EnrolledCandidate: Snapshot records from the data store
    - CalendarDate, TimeOfDay, Instant: Wall-clock value objects
"""

from election_lifecycle.lib.lifecycle.aggregator import ElectionStats, aggregate
from election_lifecycle.lib.lifecycle.models import (
    INDEPENDENT,
    STATUS_ORDER,
    Election,
    ElectionStatus,
    EnrolledCandidate,
)
from election_lifecycle.lib.lifecycle.resolver import resolve_status
from election_lifecycle.lib.lifecycle.temporal import (
    CalendarDate,
    Instant,
    TimeOfDay,
    as_instant,
    format_calendar_date,
    format_time_of_day,
    parse_time_of_day,
    to_instant,
    to_minutes,
)

__all__ = [
    "INDEPENDENT",
    "STATUS_ORDER",
    "CalendarDate",
    "Election",
    "ElectionStats",
    "ElectionStatus",
    "EnrolledCandidate",
    "Instant",
    "TimeOfDay",
    "aggregate",
    "as_instant",
    "format_calendar_date",
    "format_time_of_day",
    "parse_time_of_day",
    "resolve_status",
    "to_instant",
    "to_minutes",
]
