"""Constants for the PTV timetable API adapter.

API Documentation: https://timetableapi.ptv.vic.gov.au/swagger/ui/index

Every request is signed with the developer's key; see ``signing.py``.
"""

API_VERSION = "v3"

# Paths relative to the base URL; formatted with quoted path segments
SEARCH_PATH = f"/{API_VERSION}/search/{{search_term}}"
DIRECTIONS_FOR_ROUTE_PATH = f"/{API_VERSION}/directions/route/{{route_id}}"
DEPARTURES_FOR_STOP_PATH = f"/{API_VERSION}/departures/route_type/{{route_type}}/stop/{{stop_id}}"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}
