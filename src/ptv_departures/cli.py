"""Command-line front end for PTV departures."""

import argparse
import asyncio
import json
import logging
import sys
from typing import TYPE_CHECKING, Any

import aiohttp
from pydantic import ValidationError

from ptv_departures.adapters.config import AppConfig
from ptv_departures.adapters.presentation import ResponseFormatter
from ptv_departures.adapters.ptv_api import PtvTransitProvider
from ptv_departures.application.services import (
    DepartureNormalizer,
    DepartureResolutionService,
)
from ptv_departures.domain.errors import DepartureResolutionError
from ptv_departures.domain.models import DepartureQuery, TransportMode

if TYPE_CHECKING:
    from ptv_departures.domain.ports import TransitProviderClient

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for counts of at least one."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from e
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def configure_logging(level: str) -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_query(args: argparse.Namespace, config: AppConfig) -> DepartureQuery:
    """Build the pipeline query from parsed arguments and configured defaults."""
    mode = TransportMode.from_name(args.mode) if args.mode else config.default_transport_mode
    return DepartureQuery(
        stop_name=args.stop,
        mode=mode,
        toward_city=args.to_city,
        limit=args.limit if args.limit is not None else config.departures_limit,
    )


async def _handle_next_command(
    args: argparse.Namespace,
    config: AppConfig,
    provider: "TransitProviderClient",
) -> int:
    """Handle the next command: resolve departures and print them."""
    service = DepartureResolutionService(
        provider,
        normalizer=DepartureNormalizer(timezone=config.timezone, clock_format=config.clock_format),
    )
    query = build_query(args, config)

    if args.strict:
        outcome = await service.resolve(query)
    else:
        outcome = await service.answer(query)

    if args.json:
        print(json.dumps(outcome.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(ResponseFormatter().format_outcome(outcome))
    return 0 if outcome.is_success else 1


async def _handle_search_command(
    args: argparse.Namespace, provider: "TransitProviderClient"
) -> int:
    """Handle the search command: list matching stops and their routes."""
    mode = TransportMode.from_name(args.mode)
    stops = await provider.search_stops(args.query, [mode])

    if args.json:
        results: list[dict[str, Any]] = [
            {
                "id": stop.id,
                "name": stop.name,
                "routes": [{"id": route.id, "name": route.name} for route in stop.routes],
            }
            for stop in stops
        ]
        print(json.dumps(results, indent=2, ensure_ascii=False))
        return 0

    if not stops:
        print(f"No {mode.spoken_name} stops found for '{args.query}'", file=sys.stderr)
        return 1

    print(f"\nFound {len(stops)} stop(s):\n")
    for stop in stops:
        print(f"  {stop.name}")
        print(f"    ID: {stop.id}")
        for route in stop.routes:
            print(f"    Route {route.id}: {route.name}")
        print()
    return 0


async def _handle_directions_command(
    args: argparse.Namespace, provider: "TransitProviderClient"
) -> int:
    """Handle the directions command: list a route's directions."""
    directions = await provider.directions_for_route(args.route_id)

    if args.json:
        results = [
            {"id": d.id, "name": d.name, "is_city_bound": d.is_city_bound} for d in directions
        ]
        print(json.dumps(results, indent=2, ensure_ascii=False))
        return 0

    if not directions:
        print(f"No directions found for route {args.route_id}", file=sys.stderr)
        return 1

    for direction in directions:
        marker = "to city" if direction.is_city_bound else "from city"
        print(f"  {direction.id}: {direction.name} ({marker})")
    return 0


def _setup_argparse() -> argparse.ArgumentParser:
    """Set up and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Next public transport departures from PTV (Victoria)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Next trains from Flinders Street, away from the city
  ptv-departures next "Flinders Street"

  # Next tram toward the city
  ptv-departures next "Brunswick Road" --mode tram --to-city

  # Search for stops
  ptv-departures search "Richmond" --mode train

  # Show a route's directions
  ptv-departures directions 11

Credentials are read from DEV_ID and API_KEY (environment or .env).
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    next_parser = subparsers.add_parser("next", help="Show the next departures from a stop")
    next_parser.add_argument("stop", help="Stop name, e.g. 'Flinders Street'")
    next_parser.add_argument("--mode", help="train, tram, bus, vline or night bus")
    next_parser.add_argument(
        "--to-city", action="store_true", help="Travel toward the city (default: away)"
    )
    next_parser.add_argument("--limit", type=_positive_int, help="Number of departures to return")
    next_parser.add_argument(
        "--strict", action="store_true", help="Fail with the error instead of a spoken apology"
    )
    next_parser.add_argument("--json", action="store_true", help="Output as JSON")

    search_parser = subparsers.add_parser("search", help="Search for stops")
    search_parser.add_argument("query", help="Stop name to search for")
    search_parser.add_argument("--mode", default="train", help="Transport mode (default: train)")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    directions_parser = subparsers.add_parser("directions", help="List a route's directions")
    directions_parser.add_argument("route_id", type=int, help="Route ID")
    directions_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def _execute_command(
    args: argparse.Namespace,
    config: AppConfig,
    provider: "TransitProviderClient",
) -> int:
    """Execute the appropriate command based on args."""
    if args.command == "next":
        return await _handle_next_command(args, config, provider)
    if args.command == "search":
        return await _handle_search_command(args, provider)
    if args.command == "directions":
        return await _handle_directions_command(args, provider)
    raise ValueError(f"Unknown command: {args.command}")


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = AppConfig()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(config.log_level)
    if not config.has_credentials:
        logger.warning("DEV_ID and API_KEY are not set; PTV requests will fail")

    # One session and one provider for the whole process
    async with aiohttp.ClientSession() as session:
        provider = PtvTransitProvider.from_config(config, session)
        try:
            return await _execute_command(args, config, provider)
        except (DepartureResolutionError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
