"""HTTP client for PTV timetable API requests."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import aiohttp

from ptv_departures.adapters.api_request_logger import log_api_request
from ptv_departures.adapters.ptv_api.constants import (
    DEFAULT_HEADERS,
    DEPARTURES_FOR_STOP_PATH,
    DIRECTIONS_FOR_ROUTE_PATH,
    SEARCH_PATH,
)
from ptv_departures.adapters.ptv_api.signing import sign_request
from ptv_departures.domain.errors import ProviderUnavailableError
from ptv_departures.domain.models import ErrorDetails

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class PtvHttpClient:
    """HTTP client for signed PTV API requests.

    Every failure, whether transport-level or a rejected request, is raised as
    ``ProviderUnavailableError``; nothing is retried here.
    """

    def __init__(
        self,
        session: "ClientSession | None",
        dev_id: str,
        api_key: str,
        base_url: str = "https://timetableapi.ptv.vic.gov.au",
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize with an aiohttp session and PTV credentials."""
        self._session = session
        self._dev_id = dev_id
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def search(
        self, search_term: str, route_types: list[int], include_outlets: bool = False
    ) -> dict[str, Any]:
        """GET /v3/search/{search_term}."""
        path = SEARCH_PATH.format(search_term=quote(search_term, safe=""))
        params = {"route_types": route_types, "include_outlets": include_outlets}
        return await self._get(path, params)

    async def directions_for_route(self, route_id: int) -> dict[str, Any]:
        """GET /v3/directions/route/{route_id}."""
        return await self._get(DIRECTIONS_FOR_ROUTE_PATH.format(route_id=route_id))

    async def departures_for_stop(
        self, route_type: int, stop_id: int, max_results: int, date_utc: str
    ) -> dict[str, Any]:
        """GET /v3/departures/route_type/{route_type}/stop/{stop_id}."""
        path = DEPARTURES_FOR_STOP_PATH.format(route_type=route_type, stop_id=stop_id)
        params = {"max_results": max_results, "date_utc": date_utc}
        return await self._get(path, params)

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        if self._session is None:
            raise ProviderUnavailableError(ErrorDetails(reason="PTV client has no HTTP session"))
        if not self._dev_id or not self._api_key:
            raise ProviderUnavailableError(
                ErrorDetails(reason="PTV credentials (DEV_ID, API_KEY) are not configured")
            )

        url = sign_request(self._base_url, path, params, self._dev_id, self._api_key)
        log_api_request("GET", url, DEFAULT_HEADERS)

        try:
            async with self._session.get(
                url, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                return await self._handle_response(response, path)
        except ProviderUnavailableError:
            raise
        except asyncio.TimeoutError as e:
            logger.warning(f"PTV API request timed out for {path}")
            raise ProviderUnavailableError(
                ErrorDetails(reason=f"Request to {path} timed out")
            ) from e
        except aiohttp.ClientError as e:
            logger.warning(f"Error calling PTV API {path}: {e}")
            raise ProviderUnavailableError(ErrorDetails(reason=str(e) or type(e).__name__)) from e

    async def _handle_response(self, response: "ClientResponse", path: str) -> dict[str, Any]:
        if response.status != 200:
            reason = await self._error_reason(response)
            logger.error(f"PTV API returned status {response.status} for {path}: {reason}")
            raise ProviderUnavailableError(ErrorDetails(status_code=response.status, reason=reason))

        try:
            data = await response.json(content_type=None)
        except ValueError as e:
            logger.error(f"PTV API returned an invalid JSON body for {path}")
            raise ProviderUnavailableError(
                ErrorDetails(status_code=response.status, reason=f"Invalid JSON body for {path}")
            ) from e
        if not isinstance(data, dict):
            raise ProviderUnavailableError(
                ErrorDetails(
                    status_code=response.status,
                    reason=f"Unexpected response body for {path}",
                )
            )
        return data

    @staticmethod
    async def _error_reason(response: "ClientResponse") -> str:
        """Extract PTV's error message, falling back to the raw body."""
        text = await response.text()
        try:
            data = await response.json(content_type=None)
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return text[:200] if text else (response.reason or "unknown error")
