"""Departure resolution pipeline (use case).

Stop lookup, then one concurrent direction lookup per route, then the
departure board query, normalization and enrichment. ``resolve`` raises the
typed domain errors; ``answer`` is the boundary used by front ends and turns
every failure into a ``DepartureOutcome``.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from ptv_departures.application.services.departure_enricher import DepartureEnricher
from ptv_departures.application.services.departure_normalizer import DepartureNormalizer
from ptv_departures.application.services.direction_resolver import DirectionResolver
from ptv_departures.application.services.stop_resolver import StopResolver
from ptv_departures.domain.errors import (
    NoMatchingDirectionError,
    NotFoundError,
    ProviderUnavailableError,
)
from ptv_departures.domain.models import DepartureOutcome, DepartureQuery, OutcomeStatus

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ptv_departures.domain.ports import TransitProviderClient


def _utc_now() -> datetime:
    return datetime.now(UTC)


class DepartureResolutionService:
    """Turns a stop name and direction preference into the next enriched departures."""

    def __init__(
        self,
        provider: "TransitProviderClient",
        normalizer: DepartureNormalizer | None = None,
        enricher: DepartureEnricher | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the pipeline.

        Args:
            provider: Transit provider client, constructed once by the caller.
            normalizer: Normalizer carrying the region time zone and clock format.
            enricher: Result enricher/ranker.
            clock: Source of the current UTC time, read once per request.
        """
        self._provider = provider
        self._stop_resolver = StopResolver(provider)
        self._direction_resolver = DirectionResolver(provider)
        self._normalizer = normalizer or DepartureNormalizer()
        self._enricher = enricher or DepartureEnricher()
        self._clock = clock

    async def resolve(self, query: DepartureQuery) -> DepartureOutcome:
        """Run the pipeline, raising on failure.

        Returns an ``OK`` outcome, or ``EMPTY_RESULT`` when there are no
        upcoming departures in the requested direction.

        Raises:
            NotFoundError: The stop name matched nothing.
            NoMatchingDirectionError: A route lacks the requested direction.
            ProviderUnavailableError: The provider failed.
        """
        now = self._clock()

        stop = await self._stop_resolver.resolve_stop(query.stop_name, query.mode)
        routes = list(stop.routes)
        directions = await self._direction_resolver.resolve_directions(routes, query.toward_city)

        raw = await self._provider.departures_for_stop(stop.id, query.mode, query.limit, now)
        normalized = self._normalizer.normalize(raw, now)
        departures = self._enricher.enrich(
            normalized,
            {direction.id for direction in directions},
            routes,
            directions,
            query.limit,
        )

        status = OutcomeStatus.OK if departures else OutcomeStatus.EMPTY_RESULT
        logger.info(
            f"{stop.name}: {len(departures)} departure(s) "
            f"{'to' if query.toward_city else 'from'} city ({status.value})"
        )
        return DepartureOutcome(query=query, status=status, departures=departures, stop=stop)

    async def answer(self, query: DepartureQuery) -> DepartureOutcome:
        """Run the pipeline, recovering every request failure into an outcome."""
        try:
            return await self.resolve(query)
        except NotFoundError as e:
            logger.warning(str(e))
            return DepartureOutcome(query=query, status=OutcomeStatus.NOT_FOUND)
        except NoMatchingDirectionError as e:
            logger.warning(str(e))
            return DepartureOutcome(query=query, status=OutcomeStatus.NO_MATCHING_DIRECTION)
        except ProviderUnavailableError as e:
            logger.error(str(e))
            return DepartureOutcome(
                query=query,
                status=OutcomeStatus.PROVIDER_UNAVAILABLE,
                error_details=e.details,
            )
