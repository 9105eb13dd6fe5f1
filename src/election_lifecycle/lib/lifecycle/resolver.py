"""Election status resolver — derive lifecycle status from date boundaries.

Status is never read from storage except as a fallback: it is recomputed
from the election's period start, voting day, and polling hours relative
to a caller-supplied ``now``. Only a stored ``Cancelled`` is authoritative.
"""

from datetime import date, datetime

from loguru import logger

from election_lifecycle.lib.lifecycle.models import Election, ElectionStatus
from election_lifecycle.lib.lifecycle.temporal import CalendarDate, Instant, TimeOfDay, as_instant, to_minutes


def _valid_date(value: CalendarDate | None) -> CalendarDate | None:
    return value if value is not None and value.is_valid else None


def _valid_minutes(value: TimeOfDay | None) -> int | None:
    return to_minutes(value) if value is not None and value.is_valid else None


def _fallback(election: Election) -> ElectionStatus:
    return election.stored_status or ElectionStatus.SCHEDULED


def resolve_status(election: Election, now: Instant | datetime | date) -> ElectionStatus:
    """Resolve an election's lifecycle status at a given instant.

    Rules are evaluated in order and the first match wins: cancelled
    override, missing-data fallback, scheduled, upcoming, active,
    completed, then stored-status fallback.

    Malformed dates or times are treated as absent, so the resolver never
    raises on bad data and degrades to the stored status instead.

    Args:
        election: The election snapshot.
        now: The current instant, sampled once by the caller.

    Returns:
        One of the five ElectionStatus values.
    """
    if election.stored_status == ElectionStatus.CANCELLED:
        return ElectionStatus.CANCELLED

    current = as_instant(now)
    today = current.date
    minutes = current.minutes

    start_date = _valid_date(election.start_date)
    election_date = _valid_date(election.election_date)
    start_minutes = _valid_minutes(election.start_time)
    end_minutes = _valid_minutes(election.end_time)

    if start_date is None and election_date is None:
        logger.debug("Election {} has no usable dates, using stored status", election.id)
        return _fallback(election)

    if start_date is not None and start_date > today:
        return ElectionStatus.SCHEDULED

    is_election_day = election_date is not None and today == election_date

    if start_date is not None and election_date is not None and start_minutes is not None:
        before_polling = today < election_date or (is_election_day and minutes < start_minutes)
        if before_polling:
            return ElectionStatus.UPCOMING

    if is_election_day and start_minutes is not None and end_minutes is not None:
        if start_minutes <= minutes <= end_minutes:
            return ElectionStatus.ACTIVE

    if election_date is not None and end_minutes is not None:
        if today > election_date or (is_election_day and minutes > end_minutes):
            return ElectionStatus.COMPLETED

    logger.debug("No lifecycle rule matched election {}, using stored status", election.id)
    return _fallback(election)
