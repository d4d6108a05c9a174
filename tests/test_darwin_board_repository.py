"""Tests for the Live Departure Boards repository and HTTP client."""

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from uk_departures.adapters.darwin_api import DarwinBoardRepository, DarwinHttpClient
from uk_departures.domain.models import DepartureBoard, ErrorDetails, ServiceDetails

BASE_URL = "https://example.test/LDBWS/api/20220120"


def _mock_session(status: int = 200, data: Any = None, text: str = "") -> MagicMock:
    """Session whose get() returns an async context manager yielding a canned response."""
    response = MagicMock()
    response.status = status
    response.headers = {"Content-Type": "application/json"}
    response.json = AsyncMock(return_value=data)
    response.text = AsyncMock(return_value=text)

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.get = MagicMock(return_value=context)
    return session


def _board_json() -> dict[str, Any]:
    return {
        "generatedAt": "2026-03-01T14:02:11+00:00",
        "locationName": "London Paddington",
        "crs": "PAD",
        "trainServices": [{"std": "14:05", "etd": "On time", "serviceID": "svc-1"}],
    }


@pytest.mark.asyncio
async def test_fetch_departure_board_sends_token_and_params() -> None:
    """Given a successful response, when fetching departures, then the request carries the key and filters."""
    session = _mock_session(data=_board_json())
    repository = DarwinBoardRepository(session, "secret", base_url=BASE_URL + "/")

    board = await repository.fetch_departure_board(
        "pad", destination_code="rdg", row_limit=5, time_offset=30, time_window=60
    )

    assert isinstance(board, DepartureBoard)
    assert board.origin_code == "PAD"
    assert len(board.services) == 1

    args, kwargs = session.get.call_args
    assert args[0] == f"{BASE_URL}/GetDepartureBoard/PAD"
    assert kwargs["headers"]["x-apikey"] == "secret"
    assert kwargs["params"] == {
        "numRows": 5,
        "timeOffset": 30,
        "timeWindow": 60,
        "filterCrs": "RDG",
        "filterType": "to",
    }


@pytest.mark.asyncio
async def test_fetch_departure_board_without_filter_omits_filter_params() -> None:
    """Given no destination, when fetching departures, then no filter parameters are sent."""
    session = _mock_session(data=_board_json())
    repository = DarwinBoardRepository(session, "secret", base_url=BASE_URL)

    await repository.fetch_departure_board("PAD")

    params = session.get.call_args.kwargs["params"]
    assert "filterCrs" not in params
    assert "filterType" not in params
    assert params["numRows"] == 10


@pytest.mark.asyncio
async def test_row_limit_is_clamped() -> None:
    """Given a row limit above the API maximum, when fetching, then it is clamped to 150."""
    session = _mock_session(data=_board_json())
    repository = DarwinBoardRepository(session, "secret", base_url=BASE_URL)

    await repository.fetch_departure_board("PAD", row_limit=500)

    assert session.get.call_args.kwargs["params"]["numRows"] == 150


@pytest.mark.asyncio
async def test_fetch_arrival_board_filters_from_origin() -> None:
    """Given an origin filter, when fetching arrivals, then the arrival endpoint is used with filterType 'from'."""
    session = _mock_session(data=_board_json())
    repository = DarwinBoardRepository(session, "secret", base_url=BASE_URL)

    board = await repository.fetch_arrival_board("bri", origin_code="pad")

    assert isinstance(board, DepartureBoard)
    assert board.is_arrivals is True
    args, kwargs = session.get.call_args
    assert args[0] == f"{BASE_URL}/GetArrivalBoard/BRI"
    assert kwargs["params"]["filterCrs"] == "PAD"
    assert kwargs["params"]["filterType"] == "from"


@pytest.mark.asyncio
async def test_fetch_service_details_quotes_the_id() -> None:
    """Given a service id with URL-unsafe characters, when fetching details, then the id is escaped."""
    session = _mock_session(data={"locationName": "Reading", "crs": "RDG", "operator": "GWR"})
    repository = DarwinBoardRepository(session, "secret", base_url=BASE_URL)

    details = await repository.fetch_service_details("abc/123+=")

    assert isinstance(details, ServiceDetails)
    assert details.service_id == "abc/123+="
    assert session.get.call_args.args[0] == f"{BASE_URL}/GetServiceDetails/abc%2F123%2B%3D"


@pytest.mark.asyncio
async def test_non_200_response_returns_error_details() -> None:
    """Given a 401 response, when fetching, then ErrorDetails with the status code is returned."""
    session = _mock_session(status=401, text="Unauthorized")
    repository = DarwinBoardRepository(session, "bad-token", base_url=BASE_URL)

    result = await repository.fetch_departure_board("PAD")

    assert isinstance(result, ErrorDetails)
    assert result.status_code == 401


@pytest.mark.asyncio
async def test_non_object_body_returns_error_details() -> None:
    """Given a JSON list instead of an object, when fetching, then ErrorDetails is returned."""
    session = _mock_session(data=[1, 2, 3])
    client = DarwinHttpClient(session, "secret", base_url=BASE_URL)

    result = await client.get_json("GetDepartureBoard/PAD")

    assert isinstance(result, ErrorDetails)
    assert result.reason == "Unexpected response format"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error", [asyncio.TimeoutError(), aiohttp.ClientConnectionError("connection refused")]
)
async def test_transport_errors_return_error_details(error: Exception) -> None:
    """Given a timeout or connection error, when fetching, then ErrorDetails is returned instead of raising."""
    session = MagicMock()
    session.get = MagicMock(side_effect=error)
    repository = DarwinBoardRepository(session, "secret", base_url=BASE_URL)

    result = await repository.fetch_departure_board("PAD")

    assert isinstance(result, ErrorDetails)
    assert result.reason.startswith("Request failed")


@pytest.mark.asyncio
async def test_missing_token_skips_the_request() -> None:
    """Given no API token, when fetching, then no request is made and ErrorDetails is returned."""
    session = _mock_session(data=_board_json())
    repository = DarwinBoardRepository(session, None, base_url=BASE_URL)

    result = await repository.fetch_departure_board("PAD")

    assert isinstance(result, ErrorDetails)
    session.get.assert_not_called()


@pytest.mark.asyncio
async def test_missing_session_returns_error_details() -> None:
    """Given no HTTP session, when fetching, then ErrorDetails is returned."""
    repository = DarwinBoardRepository(None, "secret", base_url=BASE_URL)

    result = await repository.fetch_service_details("svc-1")

    assert isinstance(result, ErrorDetails)
