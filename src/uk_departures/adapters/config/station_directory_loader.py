"""Station directory loader."""

import logging

from uk_departures.adapters.config.app_config import AppConfig
from uk_departures.adapters.station_data import UK_STATION_ALIASES
from uk_departures.domain.models.station_directory import StationDirectory

logger = logging.getLogger(__name__)


class StationDirectoryLoader:
    """Builds the station directory from built-in data and app config."""

    @staticmethod
    def load(config: AppConfig) -> StationDirectory:
        """Load the built-in aliases plus any configured extra aliases."""
        aliases = list(UK_STATION_ALIASES)

        for station_data in config.get_station_aliases():
            name = station_data.get("name")
            code = station_data.get("code")

            if not isinstance(name, str) or not name.strip():
                logger.warning(f"Skipping station entry without a name: {station_data}")
                continue
            if not isinstance(code, str) or len(code.strip()) != 3 or not code.strip().isalpha():
                logger.warning(f"Skipping station '{name}': code must be three letters")
                continue

            aliases.append((name.strip(), code.strip().upper()))

        directory = StationDirectory(aliases)
        logger.debug(f"Loaded station directory with {len(directory)} aliases")
        return directory

    @staticmethod
    def default() -> StationDirectory:
        """Build the directory from the built-in aliases only."""
        return StationDirectory(UK_STATION_ALIASES)
