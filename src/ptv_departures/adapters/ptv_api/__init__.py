"""PTV timetable API adapters."""

from ptv_departures.adapters.ptv_api.http_client import PtvHttpClient
from ptv_departures.adapters.ptv_api.ptv_transit_provider import PtvTransitProvider
from ptv_departures.adapters.ptv_api.response_parser import PtvResponseParser

__all__ = [
    "PtvHttpClient",
    "PtvResponseParser",
    "PtvTransitProvider",
]
