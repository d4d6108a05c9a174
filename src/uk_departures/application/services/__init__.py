"""Application services (use cases) for station resolution and boards."""

from uk_departures.application.services.board_status import (
    STANDARD_LAYOUT,
    WIDE_LAYOUT,
    BoardLayout,
    describe_status,
    derive_status,
    destination_text,
    format_locations,
    origin_text,
    truncate,
)
from uk_departures.application.services.journey_timing import time_offset_for
from uk_departures.application.services.station_resolver import StationResolver
from uk_departures.application.services.station_selector import StationSelector

__all__ = [
    "STANDARD_LAYOUT",
    "WIDE_LAYOUT",
    "BoardLayout",
    "StationResolver",
    "StationSelector",
    "derive_status",
    "describe_status",
    "destination_text",
    "format_locations",
    "origin_text",
    "time_offset_for",
    "truncate",
]
