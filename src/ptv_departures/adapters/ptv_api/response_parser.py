"""Parser for PTV v3 API responses."""

import logging
from datetime import UTC, datetime
from typing import Any

from ptv_departures.domain.models import (
    Departure,
    Direction,
    Route,
    Stop,
    TransportMode,
)

logger = logging.getLogger(__name__)


class PtvResponseParser:
    """Parses PTV search, direction and departure payloads into domain models.

    Malformed items are skipped with a warning rather than failing the whole
    response.
    """

    @staticmethod
    def parse_stops(data: dict[str, Any]) -> list[Stop]:
        """Parse the ``stops`` of a search response, keeping provider order."""
        stops = []
        for item in data.get("stops") or []:
            stop = PtvResponseParser._parse_stop(item)
            if stop:
                stops.append(stop)
        return stops

    @staticmethod
    def parse_directions(data: dict[str, Any]) -> list[Direction]:
        """Parse the ``directions`` of a directions-for-route response."""
        directions = []
        for item in data.get("directions") or []:
            direction = PtvResponseParser._parse_direction(item)
            if direction:
                directions.append(direction)
        return directions

    @staticmethod
    def parse_departures(data: dict[str, Any]) -> list[Departure]:
        """Parse the ``departures`` of a departures-for-stop response."""
        departures = []
        for item in data.get("departures") or []:
            departure = PtvResponseParser._parse_departure(item)
            if departure:
                departures.append(departure)
        return departures

    @staticmethod
    def parse_id(value: Any) -> int | None:
        """Parse a numeric id, returning None when it is missing or not a number."""
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _parse_stop(item: Any) -> Stop | None:
        stop_id = PtvResponseParser.parse_id(item.get("stop_id")) if isinstance(item, dict) else None
        if stop_id is None:
            logger.warning(f"Skipping stop without a valid stop_id: {item!r}")
            return None

        routes = tuple(
            route
            for route in (PtvResponseParser._parse_route(r) for r in item.get("routes") or [])
            if route is not None
        )
        return Stop(
            id=stop_id,
            name=str(item.get("stop_name") or stop_id).strip(),
            routes=routes,
        )

    @staticmethod
    def _parse_route(item: Any) -> Route | None:
        route_id = PtvResponseParser.parse_id(item.get("route_id")) if isinstance(item, dict) else None
        if route_id is None:
            logger.warning(f"Skipping route without a valid route_id: {item!r}")
            return None

        route_type = PtvResponseParser.parse_id(item.get("route_type"))
        try:
            mode = TransportMode.from_route_type(route_type if route_type is not None else -1)
        except ValueError:
            logger.warning(f"Unknown route_type {item.get('route_type')!r}, assuming train")
            mode = TransportMode.TRAIN

        return Route(
            id=route_id,
            name=str(item.get("route_name") or route_id),
            mode=mode,
            number=item.get("route_number") or None,
        )

    @staticmethod
    def _parse_direction(item: Any) -> Direction | None:
        direction_id = (
            PtvResponseParser.parse_id(item.get("direction_id")) if isinstance(item, dict) else None
        )
        if direction_id is None:
            logger.warning(f"Skipping direction without a valid direction_id: {item!r}")
            return None

        return Direction(
            id=direction_id,
            name=str(item.get("direction_name") or ""),
            route_id=PtvResponseParser.parse_id(item.get("route_id")),
        )

    @staticmethod
    def _parse_departure(item: Any) -> Departure | None:
        if not isinstance(item, dict):
            logger.warning(f"Skipping malformed departure: {item!r}")
            return None

        route_id = PtvResponseParser.parse_id(item.get("route_id"))
        direction_id = PtvResponseParser.parse_id(item.get("direction_id"))
        if route_id is None or direction_id is None:
            logger.warning(f"Skipping departure without valid route_id/direction_id: {item!r}")
            return None

        platform = item.get("platform_number")
        return Departure(
            route_id=route_id,
            direction_id=direction_id,
            scheduled_departure_utc=PtvResponseParser.parse_time(
                item.get("scheduled_departure_utc")
            ),
            estimated_departure_utc=PtvResponseParser.parse_time(
                item.get("estimated_departure_utc")
            ),
            stop_id=PtvResponseParser.parse_id(item.get("stop_id")),
            run_ref=str(item["run_ref"]) if item.get("run_ref") is not None else None,
            platform_number=str(platform) if platform else None,
        )

    @staticmethod
    def parse_time(time_str: str | None) -> datetime | None:
        """Parse an ISO 8601 UTC time string, e.g. ``2024-05-01T10:03:00Z``."""
        if not time_str:
            return None

        try:
            parsed = datetime.fromisoformat(time_str.replace("Z", "+00:00"))
        except (TypeError, ValueError):
            logger.warning(f"Unparseable time {time_str!r}")
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return parsed.astimezone(UTC)

    @staticmethod
    def format_time(moment: datetime) -> str:
        """Format a moment as the ISO 8601 UTC string PTV expects for ``date_utc``."""
        return moment.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
