"""Adapters for configuration, the Darwin API, the LLM parser and the terminal."""

from uk_departures.adapters.config import AppConfig, StationDirectoryLoader
from uk_departures.adapters.console import RichTerminal
from uk_departures.adapters.darwin_api import DarwinBoardRepository
from uk_departures.adapters.nl_parser import LlmJourneyParser

__all__ = [
    "AppConfig",
    "DarwinBoardRepository",
    "LlmJourneyParser",
    "RichTerminal",
    "StationDirectoryLoader",
]
