"""Built-in station reference data."""

from uk_departures.adapters.station_data.uk_stations import UK_STATION_ALIASES

__all__ = ["UK_STATION_ALIASES"]
