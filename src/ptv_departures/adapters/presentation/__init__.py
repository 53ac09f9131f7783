"""Presentation adapters."""

from ptv_departures.adapters.presentation.response_formatter import ResponseFormatter

__all__ = ["ResponseFormatter"]
