"""Ports (interfaces) for the ports-and-adapters architecture."""

from uk_departures.domain.ports.board_repository import BoardRepository
from uk_departures.domain.ports.journey_parser import JourneyParser
from uk_departures.domain.ports.terminal import Terminal

__all__ = [
    "BoardRepository",
    "JourneyParser",
    "Terminal",
]
