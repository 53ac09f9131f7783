"""PTV transit provider adapter."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from ptv_departures.adapters.ptv_api.http_client import PtvHttpClient
from ptv_departures.adapters.ptv_api.response_parser import PtvResponseParser
from ptv_departures.domain.models import Departure, Direction, Stop, TransportMode
from ptv_departures.domain.ports.transit_provider import TransitProviderClient

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from ptv_departures.adapters.config import AppConfig


class PtvTransitProvider(TransitProviderClient):
    """Adapter for the PTV timetable API."""

    def __init__(self, http_client: PtvHttpClient) -> None:
        """Initialize with a configured PTV HTTP client."""
        self._http_client = http_client

    @classmethod
    def from_config(cls, config: "AppConfig", session: "ClientSession") -> "PtvTransitProvider":
        """Build a provider from application configuration and a shared session."""
        return cls(
            PtvHttpClient(
                session=session,
                dev_id=config.dev_id,
                api_key=config.api_key,
                base_url=config.ptv_base_url,
                timeout_seconds=config.ptv_api_timeout,
            )
        )

    async def search_stops(self, term: str, modes: list[TransportMode]) -> list[Stop]:
        """Search stops, excluding ticket outlets."""
        data = await self._http_client.search(
            term, [mode.route_type for mode in modes], include_outlets=False
        )
        stops = PtvResponseParser.parse_stops(data)
        logger.debug(f"Search {term!r} returned {len(stops)} stop(s)")
        return stops

    async def directions_for_route(self, route_id: int) -> list[Direction]:
        """Get all directions of a route."""
        data = await self._http_client.directions_for_route(route_id)
        return PtvResponseParser.parse_directions(data)

    async def departures_for_stop(
        self,
        stop_id: int,
        mode: TransportMode,
        max_results: int,
        from_utc: datetime,
    ) -> list[Departure]:
        """Get departures from a stop starting at ``from_utc``."""
        data = await self._http_client.departures_for_stop(
            route_type=mode.route_type,
            stop_id=stop_id,
            max_results=max_results,
            date_utc=PtvResponseParser.format_time(from_utc),
        )
        departures = PtvResponseParser.parse_departures(data)
        logger.debug(f"Stop {stop_id} returned {len(departures)} departure(s)")
        return departures
