"""Normalize raw departures into sortable, delay-annotated departures."""

import logging
import math
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from ptv_departures.domain.models import Departure, NormalizedDeparture

logger = logging.getLogger(__name__)

CLOCK_12H = "12h"
CLOCK_24H = "24h"
DEFAULT_TIMEZONE = "Australia/Melbourne"


def round_minutes(delta: timedelta) -> int:
    """Round a time difference to whole minutes, halves rounding up."""
    return math.floor(delta.total_seconds() / 60 + 0.5)


def effective_time(departure: Departure) -> datetime:
    """Live estimate when available, otherwise the scheduled time.

    Raises:
        ValueError: If the departure carries no time at all.
    """
    if departure.estimated_departure_utc is not None:
        return departure.estimated_departure_utc
    if departure.scheduled_departure_utc is None:
        raise ValueError("Departure has neither an estimated nor a scheduled time")
    return departure.scheduled_departure_utc


class DepartureNormalizer:
    """Converts raw departures into normalized departures for one response.

    All departures normalized by one instance share the same time zone and
    clock convention.
    """

    def __init__(self, timezone: str = DEFAULT_TIMEZONE, clock_format: str = CLOCK_12H) -> None:
        """Initialize the normalizer.

        Args:
            timezone: IANA name of the transit region's local time zone.
            clock_format: "12h" for "9:05 am" or "24h" for "09:05".
        """
        if clock_format not in (CLOCK_12H, CLOCK_24H):
            raise ValueError(f"clock_format must be '{CLOCK_12H}' or '{CLOCK_24H}'")
        self._timezone = ZoneInfo(timezone)
        self._clock_format = clock_format

    def normalize(self, raw: list[Departure], now: datetime) -> list[NormalizedDeparture]:
        """Normalize and sort departures by effective time.

        Departures without any time are dropped. Ties keep their provider order.

        Args:
            raw: Departures in provider order.
            now: Reference time for ``minutes_from_now``; never read from the clock here.
        """
        normalized = [
            self._normalize_one(departure, now) for departure in raw if departure.has_time
        ]

        dropped = len(raw) - len(normalized)
        if dropped:
            logger.debug(f"Dropped {dropped} departure(s) without scheduled or estimated time")

        normalized.sort(key=lambda d: d.effective_time_utc)
        return normalized

    def format_local_time(self, moment: datetime) -> str:
        """Render a UTC moment as local hour and minute."""
        local = moment.astimezone(self._timezone)
        if self._clock_format == CLOCK_24H:
            return local.strftime("%H:%M")
        hour = local.hour % 12 or 12
        suffix = "am" if local.hour < 12 else "pm"
        return f"{hour}:{local.minute:02d} {suffix}"

    def _normalize_one(self, departure: Departure, now: datetime) -> NormalizedDeparture:
        effective = effective_time(departure)

        scheduled = departure.scheduled_departure_utc
        delay_minutes = round_minutes(effective - scheduled) if scheduled is not None else 0

        return NormalizedDeparture(
            departure=departure,
            effective_time_utc=effective,
            local_display_time=self.format_local_time(effective),
            delay_minutes=delay_minutes,
            minutes_from_now=round_minutes(effective - now),
        )
