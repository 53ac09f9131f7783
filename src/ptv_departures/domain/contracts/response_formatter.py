"""Protocol for phrasing departure outcomes."""

from typing import Protocol

from ptv_departures.domain.models import DepartureOutcome, EnrichedDeparture


class ResponseFormatterProtocol(Protocol):
    """Protocol for turning departure outcomes into sentences for a person."""

    def format_outcome(self, outcome: DepartureOutcome) -> str:
        """Format a complete outcome, including failures.

        Args:
            outcome: The pipeline outcome to phrase.

        Returns:
            One or two sentences suitable for reading aloud.
        """
        ...

    def format_relative_time(self, minutes_from_now: int) -> str:
        """Format minutes until departure, e.g. "now", "1 minute", "5 minutes".

        Args:
            minutes_from_now: Rounded minutes until the departure; may be negative.

        Returns:
            Relative time phrase.
        """
        ...

    def format_departure(self, departure: EnrichedDeparture) -> str:
        """Format one departure as "the Sandringham line 5 minutes from now at 9:05 am".

        Args:
            departure: The departure to format.

        Returns:
            Departure phrase without a leading verb.
        """
        ...
