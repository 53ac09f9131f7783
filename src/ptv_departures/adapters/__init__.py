"""Adapters layer - external system integrations."""

from ptv_departures.adapters.config import AppConfig
from ptv_departures.adapters.presentation import ResponseFormatter
from ptv_departures.adapters.ptv_api import (
    PtvHttpClient,
    PtvTransitProvider,
)

__all__ = [
    "AppConfig",
    "PtvHttpClient",
    "PtvTransitProvider",
    "ResponseFormatter",
]
