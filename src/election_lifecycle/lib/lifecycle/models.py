"""Election snapshot records and the lifecycle status enumeration.

Records arrive from the election data store in its camelCase JSON shape.
Field names here are snake_case with camelCase aliases; both spellings are
accepted on input.
"""

import enum
from datetime import date
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from election_lifecycle.lib.lifecycle.temporal import CalendarDate, TimeOfDay, parse_time_of_day

INDEPENDENT = "Independent"


class ElectionStatus(enum.StrEnum):
    """Lifecycle status of an election."""

    SCHEDULED = "Scheduled"
    UPCOMING = "Upcoming"
    ACTIVE = "Active"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


# Progression order for the non-terminal statuses
STATUS_ORDER: dict[ElectionStatus, int] = {
    ElectionStatus.SCHEDULED: 0,
    ElectionStatus.UPCOMING: 1,
    ElectionStatus.ACTIVE: 2,
    ElectionStatus.COMPLETED: 3,
}

_STATUS_LOOKUP = {status.value.lower(): status for status in ElectionStatus}


def _coerce_calendar_date(v: Any) -> Any:
    """Accept ISO ``YYYY-MM-DD`` strings and ``date`` objects as CalendarDate."""
    if isinstance(v, date):
        return CalendarDate.from_date(v)
    if isinstance(v, str):
        if not v.strip():
            return None
        return CalendarDate.from_date(date.fromisoformat(v.strip()))
    return v


def _coerce_time_of_day(v: Any) -> Any:
    """Accept ``HH:MM`` strings as TimeOfDay."""
    if isinstance(v, str):
        if not v.strip():
            return None
        parsed = parse_time_of_day(v)
        if parsed is None:
            msg = f"Invalid time of day: {v!r}"
            raise ValueError(msg)
        return parsed
    return v


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class EnrolledCandidate(_Record):
    """A candidate enrolled in a specific election."""

    candidate_id: str
    candidate_name: str | None = None
    party_name: str | None = None
    number_of_votes: int = 0

    @field_validator("candidate_id", mode="before")
    @classmethod
    def _coerce_candidate_id(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v

    @field_validator("number_of_votes", mode="before")
    @classmethod
    def _coerce_votes(cls, v: Any) -> Any:
        return v if v is not None else 0

    @property
    def normalized_party(self) -> str:
        """Party name with absent or blank values folded into ``Independent``."""
        if self.party_name is None or not self.party_name.strip():
            return INDEPENDENT
        return self.party_name


class Election(_Record):
    """Read-only snapshot of an election record."""

    id: str
    election_name: str | None = None
    election_type: str | None = None
    stored_status: ElectionStatus | None = Field(
        default=None,
        validation_alias=AliasChoices("storedStatus", "stored_status", "status"),
    )
    start_date: CalendarDate | None = None
    end_date: CalendarDate | None = None
    election_date: CalendarDate | None = None
    start_time: TimeOfDay | None = None
    end_time: TimeOfDay | None = None
    enrolled_candidates: tuple[EnrolledCandidate, ...] = ()

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v

    @field_validator("stored_status", mode="before")
    @classmethod
    def _coerce_status(cls, v: Any) -> Any:
        """Unknown status strings are treated as absent."""
        if isinstance(v, str):
            return _STATUS_LOOKUP.get(v.strip().lower())
        return v

    @field_validator("start_date", "end_date", "election_date", mode="before")
    @classmethod
    def _coerce_dates(cls, v: Any) -> Any:
        return _coerce_calendar_date(v)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _coerce_times(cls, v: Any) -> Any:
        return _coerce_time_of_day(v)

    @field_validator("enrolled_candidates", mode="before")
    @classmethod
    def _coerce_candidates(cls, v: Any) -> Any:
        return v if v is not None else ()

    @property
    def display_name(self) -> str:
        return self.election_name or self.id
