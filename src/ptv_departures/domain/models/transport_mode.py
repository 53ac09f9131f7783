"""Transport mode domain model."""

from enum import Enum


class TransportMode(Enum):
    """Transport modes served by the provider, valued by their route type code."""

    TRAIN = 0
    TRAM = 1
    BUS = 2
    REGIONAL_RAIL = 3
    NIGHT_BUS = 4

    @property
    def route_type(self) -> int:
        """Numeric route type code expected by the provider API."""
        return self.value

    @property
    def spoken_name(self) -> str:
        """Name used when reading the mode back to a person."""
        return _SPOKEN_NAMES[self]

    @classmethod
    def from_name(cls, name: str | None) -> "TransportMode":
        """Parse a typed or spoken mode name, defaulting to train when empty.

        Raises:
            ValueError: If the name does not denote a known mode.
        """
        if name is None or not name.strip():
            return cls.TRAIN
        key = " ".join(name.lower().replace("-", " ").replace("_", " ").split())
        mode = _NAME_ALIASES.get(key)
        if mode is None:
            raise ValueError(f"Unknown transport mode: {name!r}")
        return mode

    @classmethod
    def from_route_type(cls, route_type: int) -> "TransportMode":
        """Look up a mode by its provider route type code."""
        return cls(route_type)


_SPOKEN_NAMES = {
    TransportMode.TRAIN: "train",
    TransportMode.TRAM: "tram",
    TransportMode.BUS: "bus",
    TransportMode.REGIONAL_RAIL: "V/Line train",
    TransportMode.NIGHT_BUS: "night bus",
}

_NAME_ALIASES = {
    "train": TransportMode.TRAIN,
    "metro": TransportMode.TRAIN,
    "tram": TransportMode.TRAM,
    "bus": TransportMode.BUS,
    "vline": TransportMode.REGIONAL_RAIL,
    "v/line": TransportMode.REGIONAL_RAIL,
    "v line": TransportMode.REGIONAL_RAIL,
    "regional rail": TransportMode.REGIONAL_RAIL,
    "regional train": TransportMode.REGIONAL_RAIL,
    "night bus": TransportMode.NIGHT_BUS,
    "nightbus": TransportMode.NIGHT_BUS,
}
