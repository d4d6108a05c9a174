"""Domain models for UK departures."""

from uk_departures.domain.models.departure_board import DepartureBoard
from uk_departures.domain.models.display_status import DisplayStatus, ServiceStatus
from uk_departures.domain.models.error_details import ErrorDetails, ErrorKind
from uk_departures.domain.models.journey_query import JourneyQuery
from uk_departures.domain.models.resolution import (
    CandidateMatches,
    NoMatch,
    Resolution,
    UniqueMatch,
)
from uk_departures.domain.models.selection_state import (
    BackToEntry,
    Cancelled,
    Listing,
    SearchResults,
    Searching,
    Selected,
    SelectionState,
)
from uk_departures.domain.models.service_details import CallingPoint, ServiceDetails
from uk_departures.domain.models.service_item import ServiceItem
from uk_departures.domain.models.service_location import ServiceLocation
from uk_departures.domain.models.station import Station
from uk_departures.domain.models.station_directory import StationDirectory

__all__ = [
    "BackToEntry",
    "CallingPoint",
    "CandidateMatches",
    "Cancelled",
    "DepartureBoard",
    "DisplayStatus",
    "ErrorDetails",
    "ErrorKind",
    "JourneyQuery",
    "Listing",
    "NoMatch",
    "Resolution",
    "SearchResults",
    "Searching",
    "Selected",
    "SelectionState",
    "ServiceDetails",
    "ServiceItem",
    "ServiceLocation",
    "ServiceStatus",
    "Station",
    "StationDirectory",
    "UniqueMatch",
]
