"""Configuration adapters."""

from uk_departures.adapters.config.app_config import AppConfig
from uk_departures.adapters.config.station_directory_loader import StationDirectoryLoader

__all__ = ["AppConfig", "StationDirectoryLoader"]
