"""Tests for the scriptable command line."""

import json
from collections.abc import Iterator
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from uk_departures import cli
from uk_departures.adapters.config import AppConfig
from uk_departures.domain.models import (
    DepartureBoard,
    ErrorDetails,
    ServiceDetails,
    ServiceItem,
    ServiceLocation,
)

GENERATED_AT = datetime(2026, 3, 1, 14, 0)


@pytest.fixture(autouse=True)
def isolated_config() -> Iterator[MagicMock]:
    """Run every command against a config that ignores the environment and .env."""
    with patch(
        "uk_departures.cli.AppConfig",
        side_effect=lambda: AppConfig.for_testing(darwin_api_token="token"),
    ) as mock_config:
        yield mock_config


def _board() -> DepartureBoard:
    return DepartureBoard(
        generated_at=GENERATED_AT,
        origin_name="London Paddington",
        origin_code="PAD",
        services=[
            ServiceItem(
                scheduled_time="14:05",
                expected_time="14:09",
                platform="2",
                operator_name="Great Western Railway",
                service_id="svc-1",
                destinations=[ServiceLocation("Bristol Temple Meads", "BRI")],
            )
        ],
    )


def _repository(board: DepartureBoard | ErrorDetails | None = None) -> MagicMock:
    repository = MagicMock()
    repository.fetch_departure_board = AsyncMock(return_value=board or _board())
    repository.fetch_arrival_board = AsyncMock(return_value=board or _board())
    repository.fetch_service_details = AsyncMock(
        return_value=ServiceDetails(
            generated_at=GENERATED_AT,
            service_id="svc-1",
            location_name="London Paddington",
            crs="PAD",
            operator_name="Great Western Railway",
            coach_count=8,
        )
    )
    return repository


@pytest.mark.asyncio
async def test_no_command_prints_help_and_exits(capsys: pytest.CaptureFixture[str]) -> None:
    """Given no subcommand, when running, then help is printed and the exit code is 1."""
    with pytest.raises(SystemExit) as exc_info:
        await cli.main([])

    assert exc_info.value.code == 1
    assert "search" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_search_lists_matching_stations(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a search term, when searching, then matching stations are listed with ids and codes."""
    await cli.main(["search", "padd"])

    out = capsys.readouterr().out
    assert "Found 2 station(s) matching 'padd'" in out
    assert "London Paddington" in out
    assert "(PAD)" in out


@pytest.mark.asyncio
async def test_search_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Given --json, when searching, then stations are printed as a JSON list."""
    await cli.main(["search", "padd", "--json"])

    stations = json.loads(capsys.readouterr().out)
    assert [s["name"] for s in stations] == ["London Paddington", "Paddington"]
    assert {s["code"] for s in stations} == {"PAD"}


@pytest.mark.asyncio
async def test_search_without_matches_exits_1(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a term matching nothing, when searching, then the exit code is 1."""
    with pytest.raises(SystemExit) as exc_info:
        await cli.main(["search", "Narnia"])

    assert exc_info.value.code == 1
    assert "No stations found matching 'Narnia'" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_stations_page(capsys: pytest.CaptureFixture[str]) -> None:
    """Given page 1, when listing stations, then the first page of ids is printed."""
    await cli.main(["stations", "--page", "1"])

    out = capsys.readouterr().out
    assert "Stations - Page 1 of" in out
    assert "  1. " in out
    assert " 20. " in out
    assert " 21. " not in out


@pytest.mark.asyncio
async def test_stations_page_out_of_range_exits_1() -> None:
    """Given a page past the end, when listing stations, then the exit code is 1."""
    with pytest.raises(SystemExit) as exc_info:
        await cli.main(["stations", "--page", "999"])

    assert exc_info.value.code == 1


@pytest.mark.asyncio
async def test_resolve_unique(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a known alias, when resolving, then its code and display name are printed."""
    await cli.main(["resolve", "london waterloo"])

    assert capsys.readouterr().out.strip() == "WAT  Waterloo"


@pytest.mark.asyncio
async def test_resolve_candidates(capsys: pytest.CaptureFixture[str]) -> None:
    """Given an ambiguous fragment, when resolving, then every candidate is printed."""
    await cli.main(["resolve", "padd"])

    out = capsys.readouterr().out
    assert "2 candidates for 'padd':" in out
    assert "  London Paddington (PAD)" in out


@pytest.mark.asyncio
async def test_board_renders_table(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a station and a filter, when showing a board, then the filtered board is fetched and rendered."""
    repository = _repository()
    with patch("uk_departures.cli.DarwinBoardRepository", return_value=repository):
        await cli.main(["board", "paddington", "--to", "reading", "--rows", "5"])

    repository.fetch_departure_board.assert_awaited_once_with(
        "PAD", destination_code="RDG", row_limit=5, time_window=120
    )
    out = capsys.readouterr().out
    assert "Departures from: London Paddington (PAD)" in out
    assert "Delayed" in out


@pytest.mark.asyncio
async def test_board_arrivals_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Given --arrivals --json, when showing a board, then arrivals are fetched and printed as JSON."""
    repository = _repository()
    with patch("uk_departures.cli.DarwinBoardRepository", return_value=repository):
        await cli.main(["board", "bri", "--arrivals", "--json"])

    repository.fetch_arrival_board.assert_awaited_once_with(
        "BRI", origin_code=None, row_limit=15, time_window=120
    )
    data = json.loads(capsys.readouterr().out)
    assert data["origin_code"] == "PAD"
    assert data["services"][0]["service_id"] == "svc-1"


@pytest.mark.asyncio
async def test_board_ambiguous_station_exits_before_fetching(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Given an ambiguous station, when showing a board, then candidates are listed and nothing is fetched."""
    repository = _repository()
    with patch("uk_departures.cli.DarwinBoardRepository", return_value=repository):
        with pytest.raises(SystemExit) as exc_info:
            await cli.main(["board", "padd"])

    assert exc_info.value.code == 1
    assert "ambiguous" in capsys.readouterr().err
    repository.fetch_departure_board.assert_not_awaited()


@pytest.mark.asyncio
async def test_board_fetch_failure_exits_1(capsys: pytest.CaptureFixture[str]) -> None:
    """Given the API fails, when showing a board, then the reason is printed and the exit code is 1."""
    repository = _repository(ErrorDetails(status_code=401, reason="API returned status 401"))
    with patch("uk_departures.cli.DarwinBoardRepository", return_value=repository):
        with pytest.raises(SystemExit) as exc_info:
            await cli.main(["board", "pad"])

    assert exc_info.value.code == 1
    assert "API returned status 401" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_service_details(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a service id, when showing it, then the details are rendered."""
    repository = _repository()
    with patch("uk_departures.cli.DarwinBoardRepository", return_value=repository):
        await cli.main(["service", "svc-1"])

    repository.fetch_service_details.assert_awaited_once_with("svc-1")
    assert "Train Formation: 8 coaches" in capsys.readouterr().out
