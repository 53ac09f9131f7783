"""Tests for DirectionResolver."""

import asyncio
from collections.abc import Callable

import pytest
from transit_fakes import (
    DIRECTIONS,
    FRANKSTON,
    SANDRINGHAM,
    TO_CITY,
    TO_FRANKSTON,
    TO_SANDRINGHAM,
    FakeTransitProvider,
)

from ptv_departures.application.services.direction_resolver import (
    DirectionResolver,
    select_direction,
)
from ptv_departures.domain.errors import NoMatchingDirectionError
from ptv_departures.domain.models import Direction


def test_select_direction_matches_city_polarity() -> None:
    """Given one direction of each polarity, then the selected one matches the request."""
    directions = DIRECTIONS[SANDRINGHAM.id]

    to_city = select_direction(directions, toward_city=True)
    from_city = select_direction(directions, toward_city=False)

    assert to_city is not None and "City" in to_city.name
    assert from_city is not None and "City" not in from_city.name


def test_select_direction_takes_first_in_provider_order() -> None:
    """Given two outbound directions, then the first listed one wins."""
    directions = [
        Direction(id=1, name="City (Flinders Street)"),
        Direction(id=2, name="Belgrave"),
        Direction(id=3, name="Lilydale"),
    ]

    selected = select_direction(directions, toward_city=False)

    assert selected is not None and selected.id == 2


def test_city_token_is_case_sensitive() -> None:
    """Given a lower-case 'city' in a name, then the direction is not city-bound."""
    assert Direction(id=1, name="Docklands via city loop").is_city_bound is False
    assert Direction(id=2, name="City (Flinders Street)").is_city_bound is True


@pytest.mark.asyncio
async def test_resolve_direction_for_one_route(provider: FakeTransitProvider) -> None:
    """Given a route, when resolving toward the city, then the city direction is returned."""
    direction = await DirectionResolver(provider).resolve_direction(SANDRINGHAM, toward_city=True)

    assert direction.id == TO_CITY
    assert provider.calls_to("directions_for_route") == [(SANDRINGHAM.id,)]


@pytest.mark.asyncio
async def test_only_city_directions_fail_when_away_requested(
    make_provider: Callable[..., FakeTransitProvider],
) -> None:
    """Given a route with two city-bound directions, when asking away from city, then it fails."""
    provider = make_provider(
        directions={
            SANDRINGHAM.id: [
                Direction(id=1, name="City (Flinders Street)"),
                Direction(id=2, name="City (via Loop)"),
            ]
        }
    )

    with pytest.raises(NoMatchingDirectionError) as exc_info:
        await DirectionResolver(provider).resolve_direction(SANDRINGHAM, toward_city=False)

    assert exc_info.value.route_id == SANDRINGHAM.id
    assert exc_info.value.toward_city is False


@pytest.mark.asyncio
async def test_resolve_directions_keeps_route_order(provider: FakeTransitProvider) -> None:
    """Given several routes, when resolving concurrently, then one direction per route returns."""
    directions = await DirectionResolver(provider).resolve_directions(
        [SANDRINGHAM, FRANKSTON], toward_city=False
    )

    assert [d.id for d in directions] == [TO_SANDRINGHAM, TO_FRANKSTON]


class SlowProvider(FakeTransitProvider):
    """Provider whose Frankston lookup stalls until cancelled."""

    def __init__(self) -> None:
        super().__init__(directions={SANDRINGHAM.id: [Direction(id=1, name="City")]})
        self.cancelled = False

    async def directions_for_route(self, route_id: int) -> list[Direction]:
        if route_id == FRANKSTON.id:
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                self.cancelled = True
                raise
        return await super().directions_for_route(route_id)


@pytest.mark.asyncio
async def test_one_failing_route_fails_all_and_cancels_siblings() -> None:
    """Given one route without a match, when resolving all, then the request fails fast."""
    provider = SlowProvider()

    with pytest.raises(NoMatchingDirectionError):
        await asyncio.wait_for(
            DirectionResolver(provider).resolve_directions(
                [SANDRINGHAM, FRANKSTON], toward_city=False
            ),
            timeout=5,
        )

    assert provider.cancelled is True
