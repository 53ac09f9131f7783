"""Departure outcome domain model."""

from dataclasses import dataclass, field
from enum import Enum

from ptv_departures.domain.models.departure import EnrichedDeparture
from ptv_departures.domain.models.departure_query import DepartureQuery
from ptv_departures.domain.models.error_details import ErrorDetails
from ptv_departures.domain.models.stop import Stop


class OutcomeStatus(Enum):
    """Terminal states of one departure resolution request."""

    OK = "ok"
    EMPTY_RESULT = "empty_result"
    NOT_FOUND = "not_found"
    NO_MATCHING_DIRECTION = "no_matching_direction"
    PROVIDER_UNAVAILABLE = "provider_unavailable"


@dataclass(frozen=True)
class DepartureOutcome:
    """Result of a departure request as handed to the presentation layer.

    ``EMPTY_RESULT`` is a valid answer ("no upcoming departures"), distinct from
    the failure states. Only ``PROVIDER_UNAVAILABLE`` carries ``error_details``.
    """

    query: DepartureQuery
    status: OutcomeStatus
    departures: list[EnrichedDeparture] = field(default_factory=list)
    stop: Stop | None = None
    error_details: ErrorDetails | None = None

    @property
    def is_success(self) -> bool:
        return self.status in (OutcomeStatus.OK, OutcomeStatus.EMPTY_RESULT)

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "status": self.status.value,
            "stop": (
                {"id": self.stop.id, "name": self.stop.name} if self.stop is not None else None
            ),
            "departures": [departure.to_dict() for departure in self.departures],
            "error": self.error_details.model_dump() if self.error_details is not None else None,
        }
