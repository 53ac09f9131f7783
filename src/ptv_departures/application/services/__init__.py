"""Application services (use cases) for departure resolution."""

from ptv_departures.application.services.departure_enricher import DepartureEnricher
from ptv_departures.application.services.departure_normalizer import DepartureNormalizer
from ptv_departures.application.services.departure_resolution_service import (
    DepartureResolutionService,
)
from ptv_departures.application.services.direction_resolver import DirectionResolver
from ptv_departures.application.services.stop_resolver import StopResolver

__all__ = [
    "DepartureEnricher",
    "DepartureNormalizer",
    "DepartureResolutionService",
    "DirectionResolver",
    "StopResolver",
]
