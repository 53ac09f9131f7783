"""Filter, name and truncate normalized departures."""

import logging
from collections.abc import Iterable

from ptv_departures.domain.errors import MissingJoinTargetError
from ptv_departures.domain.models import (
    Direction,
    EnrichedDeparture,
    NormalizedDeparture,
    Route,
)

logger = logging.getLogger(__name__)


class DepartureEnricher:
    """Keeps departures in the resolved directions and attaches display names."""

    def enrich(
        self,
        normalized: list[NormalizedDeparture],
        direction_ids: Iterable[int],
        routes: list[Route],
        directions: list[Direction],
        limit: int,
    ) -> list[EnrichedDeparture]:
        """Filter to ``direction_ids``, join names, and keep the first ``limit`` entries.

        An empty ``direction_ids`` means no filtering. Input order (already
        chronological) is preserved.

        Raises:
            MissingJoinTargetError: If a kept departure's route or direction is unknown.
        """
        wanted = set(direction_ids)
        route_names = {route.id: route.name for route in routes}
        direction_names: dict[int, str] = {}
        for direction in directions:
            # Routes can share a direction id (e.g. every train line's "City" direction)
            direction_names.setdefault(direction.id, direction.name)

        kept = [d for d in normalized if not wanted or d.direction_id in wanted]
        logger.debug(f"Kept {len(kept)} of {len(normalized)} departure(s) in resolved directions")

        enriched = [self._join(departure, route_names, direction_names) for departure in kept]
        return enriched[:limit]

    @staticmethod
    def _join(
        departure: NormalizedDeparture,
        route_names: dict[int, str],
        direction_names: dict[int, str],
    ) -> EnrichedDeparture:
        if departure.route_id not in route_names:
            raise MissingJoinTargetError("route", departure.route_id)
        if departure.direction_id not in direction_names:
            raise MissingJoinTargetError("direction", departure.direction_id)
        return EnrichedDeparture(
            normalized=departure,
            route_name=route_names[departure.route_id],
            direction_name=direction_names[departure.direction_id],
        )
