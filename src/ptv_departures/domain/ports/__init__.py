"""Ports (interfaces) for the ports-and-adapters architecture."""

from ptv_departures.domain.ports.transit_provider import TransitProviderClient

__all__ = [
    "TransitProviderClient",
]
