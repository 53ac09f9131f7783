"""Direction domain model."""

from dataclasses import dataclass

CITY_TOKEN = "City"


@dataclass(frozen=True)
class Direction:
    """One travel direction of a route, e.g. "City (Flinders Street)"."""

    id: int
    name: str
    route_id: int | None = None

    @property
    def is_city_bound(self) -> bool:
        """Whether this direction travels toward the central business district."""
        return CITY_TOKEN in self.name
