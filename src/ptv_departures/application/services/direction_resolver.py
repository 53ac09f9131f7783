"""Resolve the direction of each route that matches a city-bound preference."""

import asyncio
import logging
from typing import TYPE_CHECKING

from ptv_departures.domain.errors import NoMatchingDirectionError
from ptv_departures.domain.models import Direction, Route

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ptv_departures.domain.ports import TransitProviderClient


def select_direction(directions: list[Direction], toward_city: bool) -> Direction | None:
    """Pick the first direction, in provider order, whose polarity matches."""
    for direction in directions:
        if direction.is_city_bound == toward_city:
            return direction
    return None


class DirectionResolver:
    """Maps a route and a "toward city" preference to a single direction."""

    def __init__(self, provider: "TransitProviderClient") -> None:
        """Initialize with the transit provider client."""
        self._provider = provider

    async def resolve_direction(self, route: Route, toward_city: bool) -> Direction:
        """Resolve the direction of one route.

        Raises:
            NoMatchingDirectionError: If none of the route's directions matches.
        """
        directions = await self._provider.directions_for_route(route.id)
        direction = select_direction(directions, toward_city)
        if direction is None:
            raise NoMatchingDirectionError(route.id, route.name, toward_city)
        logger.debug(f"Route {route.name} ({route.id}): using direction {direction.name!r}")
        return direction

    async def resolve_directions(self, routes: list[Route], toward_city: bool) -> list[Direction]:
        """Resolve directions for all routes concurrently, one per route in route order.

        All lookups must succeed. On the first failure the remaining lookups are
        cancelled and the error propagates.
        """
        tasks = [
            asyncio.ensure_future(self.resolve_direction(route, toward_city)) for route in routes
        ]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                if not task.done():
                    task.cancel()
            # Reap cancelled siblings
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
