"""Transit provider client port."""

from datetime import datetime
from typing import Protocol

from ptv_departures.domain.models.departure import Departure
from ptv_departures.domain.models.direction import Direction
from ptv_departures.domain.models.stop import Stop
from ptv_departures.domain.models.transport_mode import TransportMode


class TransitProviderClient(Protocol):
    """Port for querying stops, route directions and departure boards.

    Implementations raise ``ProviderUnavailableError`` for transport-level
    faults and rejected requests.
    """

    async def search_stops(self, term: str, modes: list[TransportMode]) -> list[Stop]:
        """Search stops by free text, restricted to the given modes, best match first."""
        ...

    async def directions_for_route(self, route_id: int) -> list[Direction]:
        """Get all directions of a route in provider order."""
        ...

    async def departures_for_stop(
        self,
        stop_id: int,
        mode: TransportMode,
        max_results: int,
        from_utc: datetime,
    ) -> list[Departure]:
        """Get upcoming departures from a stop in provider order."""
        ...
