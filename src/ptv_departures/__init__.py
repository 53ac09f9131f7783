"""PTV departures - next public transport departures for a stop."""

__version__ = "0.1.0"
