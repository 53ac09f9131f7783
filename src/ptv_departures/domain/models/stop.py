"""Stop and route domain models."""

from dataclasses import dataclass

from ptv_departures.domain.models.transport_mode import TransportMode


@dataclass(frozen=True)
class Route:
    """A named transit line serving a stop."""

    id: int
    name: str
    mode: TransportMode = TransportMode.TRAIN
    number: str | None = None  # e.g. "96" for trams and buses, empty for trains


@dataclass(frozen=True)
class Stop:
    """A physical stop or station together with the routes it services."""

    id: int
    name: str
    routes: tuple[Route, ...] = ()

