"""Domain layer - core business logic and models."""

from ptv_departures.domain.errors import (
    DepartureResolutionError,
    MissingJoinTargetError,
    NoMatchingDirectionError,
    NotFoundError,
    ProviderUnavailableError,
)
from ptv_departures.domain.models import (
    Departure,
    DepartureOutcome,
    DepartureQuery,
    Direction,
    EnrichedDeparture,
    NormalizedDeparture,
    Route,
    Stop,
    TransportMode,
)
from ptv_departures.domain.ports import TransitProviderClient

__all__ = [
    "Departure",
    "DepartureOutcome",
    "DepartureQuery",
    "DepartureResolutionError",
    "Direction",
    "EnrichedDeparture",
    "MissingJoinTargetError",
    "NoMatchingDirectionError",
    "NormalizedDeparture",
    "NotFoundError",
    "ProviderUnavailableError",
    "Route",
    "Stop",
    "TransitProviderClient",
    "TransportMode",
]
