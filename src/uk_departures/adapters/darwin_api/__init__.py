"""Live Departure Boards (Darwin) API adapters."""

from uk_departures.adapters.darwin_api.board_parser import BoardParser
from uk_departures.adapters.darwin_api.darwin_board_repository import DarwinBoardRepository
from uk_departures.adapters.darwin_api.http_client import DarwinHttpClient

__all__ = ["BoardParser", "DarwinBoardRepository", "DarwinHttpClient"]
