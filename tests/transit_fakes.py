"""In-memory transit provider and Flinders Street test data."""

from datetime import UTC, datetime

from ptv_departures.domain.models import (
    Departure,
    Direction,
    Route,
    Stop,
    TransportMode,
)

NOW = datetime(2024, 5, 1, 9, 58, 0, tzinfo=UTC)

SANDRINGHAM = Route(id=11, name="Sandringham", mode=TransportMode.TRAIN)
FRANKSTON = Route(id=6, name="Frankston", mode=TransportMode.TRAIN)

TO_CITY = 1
TO_SANDRINGHAM = 11
TO_FRANKSTON = 6

FLINDERS_STREET = Stop(id=1071, name="Flinders Street Station", routes=(SANDRINGHAM, FRANKSTON))

DIRECTIONS = {
    SANDRINGHAM.id: [
        Direction(id=TO_CITY, name="City (Flinders Street)", route_id=SANDRINGHAM.id),
        Direction(id=TO_SANDRINGHAM, name="Sandringham", route_id=SANDRINGHAM.id),
    ],
    FRANKSTON.id: [
        Direction(id=TO_CITY, name="City (Flinders Street)", route_id=FRANKSTON.id),
        Direction(id=TO_FRANKSTON, name="Frankston", route_id=FRANKSTON.id),
    ],
}


def at(hour: int, minute: int, second: int = 0) -> datetime:
    """A UTC moment on the test day."""
    return datetime(2024, 5, 1, hour, minute, second, tzinfo=UTC)


def departure(
    route: Route,
    direction_id: int,
    scheduled: datetime | None,
    estimated: datetime | None = None,
) -> Departure:
    """Build a raw departure from Flinders Street."""
    return Departure(
        route_id=route.id,
        direction_id=direction_id,
        scheduled_departure_utc=scheduled,
        estimated_departure_utc=estimated,
        stop_id=FLINDERS_STREET.id,
    )


DEPARTURES = [
    departure(FRANKSTON, TO_FRANKSTON, at(10, 6), at(10, 7)),
    departure(SANDRINGHAM, TO_CITY, at(10, 0), at(10, 1)),
    departure(SANDRINGHAM, TO_SANDRINGHAM, at(10, 0), at(10, 3)),
    departure(FRANKSTON, TO_CITY, at(10, 2)),
    departure(SANDRINGHAM, TO_SANDRINGHAM, at(10, 12)),
]


class FakeTransitProvider:
    """In-memory transit provider that records every call."""

    def __init__(
        self,
        stops: list[Stop] | None = None,
        directions: dict[int, list[Direction]] | None = None,
        departures: list[Departure] | None = None,
        failures: dict[str, Exception] | None = None,
    ) -> None:
        """Initialize with canned responses and optional per-call failures."""
        self.stops = stops if stops is not None else [FLINDERS_STREET]
        self.directions = directions if directions is not None else DIRECTIONS
        self.departures = departures if departures is not None else list(DEPARTURES)
        self.failures = failures or {}
        self.calls: list[tuple[str, tuple[object, ...]]] = []

    def _record(self, name: str, *args: object) -> None:
        self.calls.append((name, args))
        if name in self.failures:
            raise self.failures[name]

    def calls_to(self, name: str) -> list[tuple[object, ...]]:
        return [args for call, args in self.calls if call == name]

    async def search_stops(self, term: str, modes: list[TransportMode]) -> list[Stop]:
        self._record("search_stops", term, tuple(modes))
        return self.stops

    async def directions_for_route(self, route_id: int) -> list[Direction]:
        self._record("directions_for_route", route_id)
        return self.directions.get(route_id, [])

    async def departures_for_stop(
        self,
        stop_id: int,
        mode: TransportMode,
        max_results: int,
        from_utc: datetime,
    ) -> list[Departure]:
        self._record("departures_for_stop", stop_id, mode, max_results, from_utc)
        return self.departures

