"""Domain models for PTV departures."""

from ptv_departures.domain.models.departure import (
    Departure,
    EnrichedDeparture,
    NormalizedDeparture,
)
from ptv_departures.domain.models.departure_outcome import DepartureOutcome, OutcomeStatus
from ptv_departures.domain.models.departure_query import DepartureQuery
from ptv_departures.domain.models.direction import Direction
from ptv_departures.domain.models.error_details import ErrorDetails
from ptv_departures.domain.models.stop import Route, Stop
from ptv_departures.domain.models.transport_mode import TransportMode

__all__ = [
    "Departure",
    "DepartureOutcome",
    "DepartureQuery",
    "Direction",
    "EnrichedDeparture",
    "ErrorDetails",
    "NormalizedDeparture",
    "OutcomeStatus",
    "Route",
    "Stop",
    "TransportMode",
]
