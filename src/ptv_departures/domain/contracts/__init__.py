"""Contracts (protocols) for collaborators outside the core pipeline."""

from ptv_departures.domain.contracts.response_formatter import ResponseFormatterProtocol

__all__ = ["ResponseFormatterProtocol"]
