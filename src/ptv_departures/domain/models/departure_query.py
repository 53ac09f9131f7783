"""Departure query domain model."""

from dataclasses import dataclass

from ptv_departures.domain.models.transport_mode import TransportMode


@dataclass(frozen=True)
class DepartureQuery:
    """What the presentation layer asks for: a stop, a mode and a direction preference."""

    stop_name: str
    mode: TransportMode = TransportMode.TRAIN
    toward_city: bool = False
    limit: int = 2  # "next" departure plus one lookahead

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"limit must be at least 1, got {self.limit}")
