"""Calendar-date and time-of-day value objects and instant conversion.

All comparisons are local wall-clock: there is no timezone field and any
``tzinfo`` on an incoming ``datetime`` is ignored.
"""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A calendar day, ordered by (year, month, day)."""

    year: int
    month: int
    day: int

    @property
    def is_valid(self) -> bool:
        """Whether the triple names a real calendar day."""
        try:
            date(self.year, self.month, self.day)
        except (TypeError, ValueError):
            return False
        return True

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(year=value.year, month=value.month, day=value.day)

    def to_date(self) -> date:
        """Convert to a ``datetime.date``.

        Raises:
            ValueError: If the triple is not a real calendar day.
        """
        return date(self.year, self.month, self.day)


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """A wall-clock time with minute precision."""

    hour: int
    minute: int = 0

    @property
    def is_valid(self) -> bool:
        return 0 <= self.hour <= 23 and 0 <= self.minute <= 59


@dataclass(frozen=True, order=True)
class Instant:
    """A comparable point in time: calendar date first, then minutes since midnight."""

    date: CalendarDate
    minutes: int = 0

    @classmethod
    def from_datetime(cls, value: datetime) -> "Instant":
        """Build an instant from a datetime's wall-clock fields."""
        return cls(date=CalendarDate.from_date(value), minutes=value.hour * 60 + value.minute)


def to_minutes(time: TimeOfDay) -> int:
    """Return minutes since midnight for a time of day."""
    return time.hour * 60 + time.minute


def to_instant(day: CalendarDate, time: TimeOfDay | None = None) -> Instant:
    """Combine a date and optional time of day into a single instant.

    Args:
        day: The calendar date.
        time: The time of day. Absent means midnight.

    Returns:
        The combined Instant.
    """
    return Instant(date=day, minutes=to_minutes(time) if time is not None else 0)


def as_instant(value: Instant | datetime | date) -> Instant:
    """Coerce a caller-supplied ``now`` into an Instant.

    A bare ``date`` is treated as midnight of that day.
    """
    if isinstance(value, Instant):
        return value
    if isinstance(value, datetime):
        return Instant.from_datetime(value)
    if isinstance(value, date):
        return Instant(date=CalendarDate.from_date(value))
    msg = f"Cannot interpret {type(value).__name__} as an instant"
    raise TypeError(msg)


def format_calendar_date(value: CalendarDate | None) -> str:
    """Format a date as D/M/YYYY, or ``"Date not set"`` when absent."""
    if value is None:
        return "Date not set"
    return f"{value.day}/{value.month}/{value.year}"


def format_time_of_day(value: TimeOfDay | None) -> str:
    """Format a time as zero-padded HH:MM, or ``"N/A"`` when absent."""
    if value is None:
        return "N/A"
    return f"{value.hour:02d}:{value.minute:02d}"


def parse_time_of_day(text: str | None) -> TimeOfDay | None:
    """Parse an ``H:MM`` or ``HH:MM`` string.

    Args:
        text: The time string.

    Returns:
        The parsed TimeOfDay, or None for empty or non-numeric input.
    """
    if not text:
        return None
    hours, _, minutes = text.strip().partition(":")
    try:
        return TimeOfDay(hour=int(hours), minute=int(minutes))
    except ValueError:
        return None
