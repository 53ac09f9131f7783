"""Formatter for spoken departure responses."""

from ptv_departures.domain.contracts.response_formatter import ResponseFormatterProtocol
from ptv_departures.domain.models import (
    DepartureOutcome,
    EnrichedDeparture,
    OutcomeStatus,
)

MESSAGES = {
    "ERROR": "Uh Oh. Looks like something went wrong.",
    "NO_DEPARTURES": "There are no upcoming {mode} departures {direction} at {stop_name}.",
    "NOTIFY_MISSING_PERMISSIONS": (
        "The transport service rejected the request. Please check the skill's permissions "
        "and API credentials."
    ),
    "PROVIDER_FAILURE": (
        "There was an error reaching the public transport service. Please try again."
    ),
}


class ResponseFormatter(ResponseFormatterProtocol):
    """Phrases departure outcomes as plain sentences."""

    def format_outcome(self, outcome: DepartureOutcome) -> str:
        """Format an outcome of any status."""
        query = outcome.query
        direction = self.format_direction(query.toward_city)
        mode = query.mode.spoken_name

        if outcome.status is OutcomeStatus.OK and outcome.departures:
            first, *rest = outcome.departures
            sentence = f"Next {mode} {direction} is {self.format_departure(first)}."
            if rest:
                sentence += f" After that, {self.format_departure(rest[0])}."
            return sentence

        if outcome.status in (OutcomeStatus.OK, OutcomeStatus.EMPTY_RESULT):
            stop_name = outcome.stop.name if outcome.stop else query.stop_name
            return MESSAGES["NO_DEPARTURES"].format(
                mode=mode, direction=direction, stop_name=stop_name
            )

        if outcome.status is OutcomeStatus.PROVIDER_UNAVAILABLE:
            if outcome.error_details and outcome.error_details.is_authorization_failure:
                return MESSAGES["NOTIFY_MISSING_PERMISSIONS"]
            return MESSAGES["PROVIDER_FAILURE"]

        return MESSAGES["ERROR"]

    def format_departure(self, departure: EnrichedDeparture) -> str:
        """Format one departure with relative and local clock time."""
        minutes = departure.minutes_from_now
        if minutes <= 0:
            when = f"departing now at {departure.local_display_time}"
        else:
            when = f"{self.format_relative_time(minutes)} from now at {departure.local_display_time}"

        phrase = f"the {departure.route_name} {when}"
        if departure.delay_minutes > 0:
            phrase += f", running {self.format_relative_time(departure.delay_minutes)} late"
        return phrase

    def format_relative_time(self, minutes_from_now: int) -> str:
        """Format a minute count, e.g. "now", "1 minute", "5 minutes"."""
        if minutes_from_now <= 0:
            return "now"
        return f"{minutes_from_now} minute{'s' if minutes_from_now != 1 else ''}"

    @staticmethod
    def format_direction(toward_city: bool) -> str:
        return "to city" if toward_city else "from city"
