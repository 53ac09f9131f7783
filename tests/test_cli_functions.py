"""Tests for CLI helper functions and command handlers."""

import json

import pytest
from transit_fakes import FRANKSTON, SANDRINGHAM, FakeTransitProvider

from ptv_departures.adapters.config import AppConfig
from ptv_departures.cli import (
    _execute_command,
    _handle_directions_command,
    _handle_next_command,
    _handle_search_command,
    _setup_argparse,
    build_query,
    main,
)
from ptv_departures.domain.errors import NotFoundError
from ptv_departures.domain.models import TransportMode


@pytest.fixture
def config(monkeypatch: pytest.MonkeyPatch) -> AppConfig:
    for name in ("DEFAULT_MODE", "DEPARTURES_LIMIT", "CLOCK_FORMAT", "TIMEZONE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return AppConfig(_env_file=None)


def test_build_query_uses_configured_defaults(config: AppConfig) -> None:
    """Given only a stop, when building the query, then configured defaults fill the rest."""
    args = _setup_argparse().parse_args(["next", "Flinders Street"])

    query = build_query(args, config)

    assert query.stop_name == "Flinders Street"
    assert query.mode is TransportMode.TRAIN
    assert query.toward_city is False
    assert query.limit == 2


def test_build_query_uses_arguments(config: AppConfig) -> None:
    """Given mode, direction and limit flags, when building the query, then they are used."""
    args = _setup_argparse().parse_args(
        ["next", "Brunswick Road", "--mode", "tram", "--to-city", "--limit", "3"]
    )

    query = build_query(args, config)

    assert query.mode is TransportMode.TRAM
    assert query.toward_city is True
    assert query.limit == 3


@pytest.mark.asyncio
async def test_next_command_prints_json_departures(
    config: AppConfig, provider: FakeTransitProvider, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a known stop, when running next with --json, then two departures are printed."""
    args = _setup_argparse().parse_args(["next", "Flinders Street", "--json"])

    exit_code = await _handle_next_command(args, config, provider)

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["status"] == "ok"
    assert output["stop"]["name"] == "Flinders Street Station"
    assert [d["route_name"] for d in output["departures"]] == ["Sandringham", "Frankston"]
    assert [d["is_realtime"] for d in output["departures"]] == [True, True]


@pytest.mark.asyncio
async def test_next_command_prints_apology_for_unknown_stop(
    config: AppConfig, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given an unknown stop, when running next, then the apology is printed with exit 1."""
    args = _setup_argparse().parse_args(["next", "Atlantis"])

    exit_code = await _handle_next_command(args, config, FakeTransitProvider(stops=[]))

    assert exit_code == 1
    assert capsys.readouterr().out.strip() == "Uh Oh. Looks like something went wrong."


@pytest.mark.asyncio
async def test_next_command_strict_raises(config: AppConfig) -> None:
    """Given an unknown stop and --strict, when running next, then the error propagates."""
    args = _setup_argparse().parse_args(["next", "Atlantis", "--strict"])

    with pytest.raises(NotFoundError):
        await _handle_next_command(args, config, FakeTransitProvider(stops=[]))


@pytest.mark.asyncio
async def test_search_command_lists_stops_and_routes(
    provider: FakeTransitProvider, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a search, when running, then each stop and its routes are printed."""
    args = _setup_argparse().parse_args(["search", "Flinders", "--json"])

    exit_code = await _handle_search_command(args, provider)

    assert exit_code == 0
    [stop] = json.loads(capsys.readouterr().out)
    assert stop["id"] == 1071
    assert [r["id"] for r in stop["routes"]] == [SANDRINGHAM.id, FRANKSTON.id]
    assert provider.calls_to("search_stops") == [("Flinders", (TransportMode.TRAIN,))]


@pytest.mark.asyncio
async def test_search_command_without_results_fails(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Given no matching stops, when searching, then a message goes to stderr with exit 1."""
    args = _setup_argparse().parse_args(["search", "Atlantis", "--mode", "tram"])

    exit_code = await _handle_search_command(args, FakeTransitProvider(stops=[]))

    assert exit_code == 1
    assert "No tram stops found for 'Atlantis'" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_directions_command_marks_city_bound(
    provider: FakeTransitProvider, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a route, when listing directions, then city-bound ones are marked."""
    args = _setup_argparse().parse_args(["directions", str(SANDRINGHAM.id)])

    exit_code = await _handle_directions_command(args, provider)

    assert exit_code == 0
    output = capsys.readouterr().out
    assert "1: City (Flinders Street) (to city)" in output
    assert "11: Sandringham (from city)" in output


@pytest.mark.asyncio
async def test_execute_command_rejects_unknown_command(
    config: AppConfig, provider: FakeTransitProvider
) -> None:
    """Given an unknown command, when executing, then ValueError is raised."""
    args = _setup_argparse().parse_args(["directions", "11"])
    args.command = "teleport"

    with pytest.raises(ValueError, match="Unknown command"):
        await _execute_command(args, config, provider)


@pytest.mark.asyncio
async def test_main_without_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Given no command, when running main, then help is printed with exit 1."""
    exit_code = await main([])

    assert exit_code == 1
    assert "usage:" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_main_reports_invalid_configuration(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given an invalid clock format, when running main, then it exits 1 before any request."""
    monkeypatch.setenv("CLOCK_FORMAT", "analog")

    exit_code = await main(["directions", "11"])

    assert exit_code == 1
    assert "Invalid configuration" in capsys.readouterr().err


@pytest.mark.parametrize("limit", ["0", "-1", "two"])
def test_next_rejects_non_positive_limit(limit: str, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a limit below one, when parsing arguments, then argparse exits with an error."""
    with pytest.raises(SystemExit) as exc_info:
        _setup_argparse().parse_args(["next", "Flinders Street", "--limit", limit])

    assert exc_info.value.code == 2
    assert "--limit" in capsys.readouterr().err
