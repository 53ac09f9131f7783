"""Departure domain models.

A departure moves through three shapes within one request: the raw record
returned by the provider, the normalized record carrying the effective time
and delay figures, and the enriched record carrying route and direction names.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Departure:
    """A raw departure record as reported by the provider (times in UTC)."""

    route_id: int
    direction_id: int
    scheduled_departure_utc: datetime | None
    estimated_departure_utc: datetime | None = None  # None when no live prediction exists
    stop_id: int | None = None
    run_ref: str | None = None
    platform_number: str | None = None

    @property
    def has_time(self) -> bool:
        """Whether the provider reported any departure time at all."""
        return self.scheduled_departure_utc is not None or self.estimated_departure_utc is not None

    @property
    def is_realtime(self) -> bool:
        """Whether a live estimate is available."""
        return self.estimated_departure_utc is not None


@dataclass(frozen=True)
class NormalizedDeparture:
    """A departure annotated with its effective time and delay figures."""

    departure: Departure
    effective_time_utc: datetime
    local_display_time: str
    delay_minutes: int
    minutes_from_now: int

    @property
    def route_id(self) -> int:
        return self.departure.route_id

    @property
    def direction_id(self) -> int:
        return self.departure.direction_id

    @property
    def scheduled_departure_utc(self) -> datetime | None:
        return self.departure.scheduled_departure_utc

    @property
    def estimated_departure_utc(self) -> datetime | None:
        return self.departure.estimated_departure_utc


@dataclass(frozen=True)
class EnrichedDeparture:
    """A normalized departure joined with the names of its route and direction."""

    normalized: NormalizedDeparture
    route_name: str
    direction_name: str

    @property
    def route_id(self) -> int:
        return self.normalized.route_id

    @property
    def direction_id(self) -> int:
        return self.normalized.direction_id

    @property
    def effective_time_utc(self) -> datetime:
        return self.normalized.effective_time_utc

    @property
    def local_display_time(self) -> str:
        return self.normalized.local_display_time

    @property
    def delay_minutes(self) -> int:
        return self.normalized.delay_minutes

    @property
    def minutes_from_now(self) -> int:
        return self.normalized.minutes_from_now

    @property
    def platform_number(self) -> str | None:
        return self.normalized.departure.platform_number

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-friendly dictionary."""
        departure = self.normalized.departure
        return {
            "route_id": self.route_id,
            "route_name": self.route_name,
            "direction_id": self.direction_id,
            "direction_name": self.direction_name,
            "scheduled_departure_utc": _isoformat(departure.scheduled_departure_utc),
            "estimated_departure_utc": _isoformat(departure.estimated_departure_utc),
            "effective_time_utc": _isoformat(self.effective_time_utc),
            "local_display_time": self.local_display_time,
            "delay_minutes": self.delay_minutes,
            "minutes_from_now": self.minutes_from_now,
            "platform_number": departure.platform_number,
            "is_realtime": departure.is_realtime,
        }


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
