"""Interactive station selection as an explicit state machine.

Stations are always picked by their directory id, never by their position
on the screen, so an id read off page 2 or off a search result list works
from any state.
"""

import logging
import math
from collections.abc import Callable
from typing import TYPE_CHECKING

from uk_departures.domain.models import (
    BackToEntry,
    CandidateMatches,
    Cancelled,
    Listing,
    SearchResults,
    Searching,
    Selected,
    SelectionState,
    Station,
)
from uk_departures.domain.models.selection_state import TERMINAL_STATES

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from uk_departures.domain.models import StationDirectory

DEFAULT_PAGE_SIZE = 20

INVALID_ID_NOTICE = "Invalid station ID."


def _parse_id(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


class StationSelector:
    """Drives browsing and searching of the station directory."""

    def __init__(self, directory: "StationDirectory", page_size: int = DEFAULT_PAGE_SIZE) -> None:
        """Initialize with the directory to select from.

        Args:
            directory: Station directory; its ids are used for selection.
            page_size: Number of stations shown per listing page.
        """
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self._directory = directory
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_pages(self) -> int:
        """Number of listing pages, ceil(count / page_size)."""
        return math.ceil(len(self._directory) / self._page_size)

    def page_stations(self, page: int) -> list[Station]:
        """Stations shown on a listing page, ordered by id."""
        start = page * self._page_size
        return self._directory.all_stations()[start : start + self._page_size]

    def start_listing(self) -> Listing:
        return Listing(page=0)

    def start_search(self) -> Searching:
        return Searching()

    def from_candidates(self, candidates: CandidateMatches) -> SearchResults:
        """Offer a resolver candidate list for selection by id."""
        matches = tuple(
            station
            for station in (self._directory.station_by_name(name) for name in candidates.names)
            if station is not None
        )
        return SearchResults(term=candidates.query, matches=matches)

    @staticmethod
    def is_terminal(state: SelectionState) -> bool:
        return isinstance(state, TERMINAL_STATES)

    def step(self, state: SelectionState, text: str) -> SelectionState:
        """Apply one line of user input to a state and return the next state.

        Terminal states are returned unchanged.
        """
        if isinstance(state, Listing):
            return self._step_listing(state, text)
        if isinstance(state, Searching):
            return self._step_searching(text)
        if isinstance(state, SearchResults):
            return self._step_search_results(text)
        return state

    def run(
        self,
        state: SelectionState,
        read: Callable[[SelectionState], str | None],
    ) -> SelectionState:
        """Feed input into the state machine until a terminal state is reached.

        ``read`` shows the current state and returns the user's reply, or
        None when input is exhausted, which cancels the selection.
        """
        while not self.is_terminal(state):
            text = read(state)
            if text is None:
                return Cancelled(reason="No more input.")
            state = self.step(state, text)
        return state

    def _step_listing(self, state: Listing, text: str) -> SelectionState:
        command = text.strip().lower()
        page = state.page

        if command == "n":
            return Listing(page=page + 1) if page + 1 < self.total_pages else Listing(page=page)
        if command == "p":
            return Listing(page=page - 1) if page > 0 else Listing(page=page)
        if command == "b":
            return BackToEntry()
        if command in ("s", "search"):
            return Searching()

        station_id = _parse_id(command)
        if station_id is not None:
            station = self._directory.station_by_id(station_id)
            if station is not None:
                return Selected(station=station)
            logger.debug(f"Unknown station id {station_id} on page {page}")
            return Listing(page=page, notice=INVALID_ID_NOTICE)

        return Listing(page=page)

    def _step_searching(self, text: str) -> SelectionState:
        term = text.strip()
        if not term:
            return Cancelled()

        matches = self._directory.search_stations(term)
        if not matches:
            return Cancelled(reason=f"No stations found matching '{term}'.")
        return SearchResults(term=term, matches=tuple(matches))

    def _step_search_results(self, text: str) -> SelectionState:
        station_id = _parse_id(text.strip())
        if station_id is not None:
            station = self._directory.station_by_id(station_id)
            if station is not None:
                return Selected(station=station)
        return Cancelled()
