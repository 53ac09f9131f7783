"""Resolve a free-text stop name to a single provider stop."""

import logging
import re
from typing import TYPE_CHECKING

from ptv_departures.domain.errors import NotFoundError
from ptv_departures.domain.models import Stop, TransportMode

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ptv_departures.domain.ports import TransitProviderClient

_STREET_PATTERN = re.compile(r"\bstreet\b", re.IGNORECASE)


def build_search_term(name: str) -> str:
    """Turn a spoken stop name into a provider search term.

    The word "street" is dropped unless nothing else is left.
    """
    collapsed = " ".join(name.split())
    without_street = " ".join(_STREET_PATTERN.sub(" ", collapsed).split())
    return without_street or collapsed


class StopResolver:
    """Maps a stop name and transport mode to exactly one stop."""

    def __init__(self, provider: "TransitProviderClient") -> None:
        """Initialize with the transit provider client."""
        self._provider = provider

    async def resolve_stop(self, name: str, mode: TransportMode = TransportMode.TRAIN) -> Stop:
        """Find the provider's best match for a stop name.

        The provider's relevance ranking is trusted: the first result wins.

        Raises:
            NotFoundError: If no stop matches, or the match services no routes.
        """
        if not name or not name.strip():
            raise NotFoundError(name, "Stop name must not be empty")

        term = build_search_term(name)
        logger.debug(f"Searching {mode.spoken_name} stops for {term!r}")
        stops = await self._provider.search_stops(term, [mode])
        if not stops:
            raise NotFoundError(name)

        stop = stops[0]
        if not stop.routes:
            raise NotFoundError(name, f"Stop {stop.name!r} matching {name!r} services no routes")

        logger.debug(f"Resolved {name!r} to stop {stop.id} ({stop.name}) with {len(stop.routes)} route(s)")
        return stop
