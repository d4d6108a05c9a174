"""Board repository port."""

from typing import Protocol

from uk_departures.domain.models.departure_board import DepartureBoard
from uk_departures.domain.models.error_details import ErrorDetails
from uk_departures.domain.models.service_details import ServiceDetails


class BoardRepository(Protocol):
    """Port for retrieving live board and service information."""

    async def fetch_departure_board(
        self,
        origin_code: str,
        destination_code: str | None = None,
        row_limit: int = 10,
        time_offset: int = 0,
        time_window: int = 120,
    ) -> DepartureBoard | ErrorDetails:
        """Get departures from a station, optionally only those calling at another."""
        ...

    async def fetch_arrival_board(
        self,
        station_code: str,
        origin_code: str | None = None,
        row_limit: int = 10,
        time_offset: int = 0,
        time_window: int = 120,
    ) -> DepartureBoard | ErrorDetails:
        """Get arrivals at a station, optionally only those coming from another."""
        ...

    async def fetch_service_details(self, service_id: str) -> ServiceDetails | ErrorDetails:
        """Get the calling pattern of a single service."""
        ...
