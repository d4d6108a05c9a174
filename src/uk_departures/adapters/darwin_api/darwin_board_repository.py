"""Board repository adapter for the Live Departure Boards JSON API."""

import logging
from urllib.parse import quote
from typing import TYPE_CHECKING

from uk_departures.adapters.darwin_api.board_parser import BoardParser
from uk_departures.adapters.darwin_api.constants import (
    ARRIVAL_BOARD_PATH,
    DEPARTURE_BOARD_PATH,
    FILTER_FROM,
    FILTER_TO,
    MAX_ROWS,
    SERVICE_DETAILS_PATH,
)
from uk_departures.adapters.darwin_api.http_client import DarwinHttpClient
from uk_departures.domain.models.departure_board import DepartureBoard
from uk_departures.domain.models.error_details import ErrorDetails
from uk_departures.domain.models.service_details import ServiceDetails
from uk_departures.domain.ports.board_repository import BoardRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class DarwinBoardRepository(BoardRepository):
    """Adapter fetching boards and service details from Darwin."""

    def __init__(
        self,
        session: "ClientSession | None",
        token: str | None,
        base_url: str,
        timeout_seconds: int = 30,
    ) -> None:
        """Initialize with the aiohttp session and API credentials."""
        self._http_client = DarwinHttpClient(
            session=session, token=token, base_url=base_url, timeout_seconds=timeout_seconds
        )

    @staticmethod
    def _board_params(
        filter_code: str | None,
        filter_type: str,
        row_limit: int,
        time_offset: int,
        time_window: int,
    ) -> dict[str, str | int]:
        params: dict[str, str | int] = {
            "numRows": max(1, min(row_limit, MAX_ROWS)),
            "timeOffset": time_offset,
            "timeWindow": time_window,
        }
        if filter_code:
            params["filterCrs"] = filter_code.upper()
            params["filterType"] = filter_type
        return params

    async def _fetch_board(
        self,
        path: str,
        station_code: str,
        params: dict[str, str | int],
        is_arrivals: bool,
    ) -> DepartureBoard | ErrorDetails:
        result = await self._http_client.get_json(f"{path}/{station_code.upper()}", params)
        if isinstance(result, ErrorDetails):
            return result
        board = BoardParser.parse_board(result, is_arrivals=is_arrivals)
        logger.debug(f"Fetched {len(board.services)} services for {station_code.upper()}")
        return board

    async def fetch_departure_board(
        self,
        origin_code: str,
        destination_code: str | None = None,
        row_limit: int = 10,
        time_offset: int = 0,
        time_window: int = 120,
    ) -> DepartureBoard | ErrorDetails:
        """Get departures from a station.

        Args:
            origin_code: CRS code of the station.
            destination_code: Only show services calling at this station.
            row_limit: Maximum number of services.
            time_offset: Minutes from now to start the board at.
            time_window: Minutes after the offset to include.

        Returns:
            DepartureBoard, or ErrorDetails if the request failed.
        """
        params = self._board_params(
            destination_code, FILTER_TO, row_limit, time_offset, time_window
        )
        return await self._fetch_board(DEPARTURE_BOARD_PATH, origin_code, params, False)

    async def fetch_arrival_board(
        self,
        station_code: str,
        origin_code: str | None = None,
        row_limit: int = 10,
        time_offset: int = 0,
        time_window: int = 120,
    ) -> DepartureBoard | ErrorDetails:
        """Get arrivals at a station, optionally only those coming from ``origin_code``."""
        params = self._board_params(origin_code, FILTER_FROM, row_limit, time_offset, time_window)
        return await self._fetch_board(ARRIVAL_BOARD_PATH, station_code, params, True)

    async def fetch_service_details(self, service_id: str) -> ServiceDetails | ErrorDetails:
        """Get the calling pattern of a service by its board service id."""
        path = f"{SERVICE_DETAILS_PATH}/{quote(service_id, safe='')}"
        result = await self._http_client.get_json(path)
        if isinstance(result, ErrorDetails):
            return result
        return BoardParser.parse_service_details(result, service_id)
