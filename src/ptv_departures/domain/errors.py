"""Typed errors raised while resolving departures.

All request-level failures derive from ``DepartureResolutionError`` and are
recovered at the pipeline boundary. ``MissingJoinTargetError`` is outside that
hierarchy and is never turned into a user-facing outcome.
"""

from ptv_departures.domain.models.error_details import ErrorDetails


class DepartureResolutionError(Exception):
    """Base error for the departure resolution pipeline."""


class NotFoundError(DepartureResolutionError):
    """The stop name did not match any provider result."""

    def __init__(self, stop_name: str, message: str | None = None) -> None:
        self.stop_name = stop_name
        super().__init__(message or f"No stop found matching {stop_name!r}")


class NoMatchingDirectionError(DepartureResolutionError):
    """A route has no direction with the requested city-bound polarity."""

    def __init__(self, route_id: int, route_name: str, toward_city: bool) -> None:
        self.route_id = route_id
        self.route_name = route_name
        self.toward_city = toward_city
        polarity = "toward" if toward_city else "away from"
        super().__init__(
            f"Route {route_name!r} ({route_id}) has no direction travelling {polarity} the city"
        )


class ProviderUnavailableError(DepartureResolutionError):
    """The transit provider could not be reached or rejected the request."""

    def __init__(self, details: ErrorDetails) -> None:
        self.details = details
        if details.status_code is not None:
            super().__init__(f"Provider error {details.status_code}: {details.reason}")
        else:
            super().__init__(f"Provider error: {details.reason}")

    @property
    def status_code(self) -> int | None:
        return self.details.status_code

    @property
    def is_authorization_failure(self) -> bool:
        return self.details.is_authorization_failure


class MissingJoinTargetError(LookupError):
    """A departure references a route or direction that was not resolved in this request."""

    def __init__(self, kind: str, target_id: int) -> None:
        self.kind = kind
        self.target_id = target_id
        super().__init__(f"No {kind} with id {target_id} was resolved for this request")
