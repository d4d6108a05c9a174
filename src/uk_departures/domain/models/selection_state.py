"""States of the interactive station selection."""

from dataclasses import dataclass

from uk_departures.domain.models.station import Station


@dataclass(frozen=True)
class Listing:
    """Browsing one page of the full directory."""

    page: int
    notice: str | None = None  # set after an unknown station id


@dataclass(frozen=True)
class Searching:
    """Waiting for a search term."""


@dataclass(frozen=True)
class SearchResults:
    """Showing all stations that matched a term, waiting for an id."""

    term: str
    matches: tuple[Station, ...]


@dataclass(frozen=True)
class Selected:
    """A station was chosen."""

    station: Station


@dataclass(frozen=True)
class Cancelled:
    """Selection was abandoned."""

    reason: str | None = None


@dataclass(frozen=True)
class BackToEntry:
    """User asked to go back to free-text station entry."""


SelectionState = Listing | Searching | SearchResults | Selected | Cancelled | BackToEntry
TERMINAL_STATES = (Selected, Cancelled, BackToEntry)
