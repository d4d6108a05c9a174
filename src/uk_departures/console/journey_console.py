"""Interactive journey console: pick stations, show a live board, drill into a service."""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from uk_departures.application.services import (
    STANDARD_LAYOUT,
    WIDE_LAYOUT,
    StationResolver,
    StationSelector,
    time_offset_for,
)
from uk_departures.console.board_renderer import (
    LIGHT_RULE,
    BoardRenderer,
    RenderedLine,
    render_service_details,
)
from uk_departures.domain.models import (
    CandidateMatches,
    Cancelled,
    DepartureBoard,
    ErrorDetails,
    JourneyQuery,
    Listing,
    NoMatch,
    SearchResults,
    Searching,
    Selected,
    SelectionState,
    Station,
    UniqueMatch,
)

if TYPE_CHECKING:
    from uk_departures.adapters.config import AppConfig
    from uk_departures.domain.models import StationDirectory
    from uk_departures.domain.ports import BoardRepository, JourneyParser, Terminal

logger = logging.getLogger(__name__)

MENU_RULE = "=" * 80
EXIT_WORDS = ("exit", "quit")

BANNER = [
    "",
    "  _   _ _  __  ____                         _                       ",
    " | | | | |/ / |  _ \\  ___ _ __   __ _ _ __| |_ _   _ _ __ ___  ___ ",
    " | | | | ' /  | | | |/ _ \\ '_ \\ / _` | '__| __| | | | '__/ _ \\/ __|",
    " | |_| | . \\  | |_| |  __/ |_) | (_| | |  | |_| |_| | | |  __/\\__ \\",
    "  \\___/|_|\\_\\ |____/ \\___| .__/ \\__,_|_|   \\__|\\__,_|_|  \\___||___/",
    "                         |_|                                       ",
]


class JourneyConsole:
    """Runs the interactive loop on top of a terminal, a board repository and an optional parser."""

    def __init__(
        self,
        directory: "StationDirectory",
        boards: "BoardRepository",
        parser: "JourneyParser",
        terminal: "Terminal",
        config: "AppConfig",
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._directory = directory
        self._boards = boards
        self._parser = parser
        self._terminal = terminal
        self._config = config
        self._clock = clock
        self._resolver = StationResolver(directory)
        self._selector = StationSelector(directory, page_size=config.page_size)
        self._renderer = BoardRenderer(WIDE_LAYOUT if config.wide_layout else STANDARD_LAYOUT)
        self._input_closed = False
        self._offered: SearchResults | None = None

    def _write(self, text: str = "", style: str | None = None) -> None:
        self._terminal.write(text, style)

    def _write_lines(self, lines: list[RenderedLine]) -> None:
        for line in lines:
            self._terminal.write(line.text, line.style)

    def _read(self, prompt: str = "") -> str | None:
        reply = self._terminal.read_line(prompt)
        if reply is None:
            self._input_closed = True
            return None
        return reply.strip()

    def _announce(self, code: str) -> None:
        name = self._directory.name_for_code(code) or code
        self._write(f"Selected: {name} ({code})", "green")

    async def run(self) -> None:
        """Loop over searches until the user quits or input runs out."""
        self._write_lines([RenderedLine(line, "cyan") for line in BANNER])
        if self._parser.is_enabled:
            self._write("AI Natural Language Query Mode: ENABLED", "green")

        while not self._input_closed:
            self._write("")
            self._write(MENU_RULE)
            try:
                if self._parser.is_enabled:
                    if not await self._choose_mode():
                        break
                else:
                    await self.manual_flow()
            except Exception as e:
                logger.exception("Unexpected error in journey loop")
                self._write(f"\nError: {e}", "red")
                if self._read("Press Enter to continue...") is None:
                    break
                continue

            if self._input_closed:
                break
            self._write("")
            self._write(MENU_RULE)
            again = self._read("Press Enter to search again, or type 'exit' to quit: ")
            if again is None or again.lower() in EXIT_WORDS:
                break

        self._write("")
        self._write("Thank you for using UK Departures!")

    async def _choose_mode(self) -> bool:
        """Show the mode menu and run the chosen flow. Returns False to quit."""
        self._write("How would you like to search?")
        self._write("1. Natural language (e.g., 'Trains from Paddington to Bristol around 3pm')")
        self._write("2. Traditional mode (step-by-step selection)")
        choice = self._read("\nEnter choice (1/2) or type your query directly: ")
        if choice is None or choice.lower() in EXIT_WORDS:
            return False

        if choice == "1":
            query_text = self._read("\nWhat journey are you planning? ")
            if query_text is None:
                return False
            if query_text:
                await self.natural_language_flow(query_text)
            else:
                await self.manual_flow()
        elif choice in ("2", ""):
            await self.manual_flow()
        else:
            await self.natural_language_flow(choice)
        return True

    # Natural-language flow

    async def natural_language_flow(self, text: str) -> None:
        """Parse a free-text journey and show the matching board."""
        self._write("")
        self._write("Processing your query with AI...")
        query = await self._parser.parse_query(text)
        if query is None or not query.is_valid:
            logger.info(f"Could not parse journey query: {text!r}")
            self._write("I couldn't understand that query. Let's try the traditional mode.", "yellow")
            await self.manual_flow()
            return

        self._describe_query(query)

        origin = self._resolve_with_candidates(query.departure_station or "", "departure")
        if origin is None:
            if not self._input_closed:
                self._write("Could not determine departure station. Please try again.", "red")
            return

        destination = None
        if query.destination_station:
            destination = self._resolve_with_candidates(query.destination_station, "destination")
            if destination is None:
                if self._input_closed:
                    return
                self._write("Showing all services without a destination filter.", "yellow")

        preferred = query.preferred_departure_time or query.preferred_arrival_time
        offset = time_offset_for(preferred, self._clock())

        self._write("")
        if query.is_departure:
            self._write("Fetching live departure information...")
            self._write("")
            board = await self._boards.fetch_departure_board(
                origin,
                destination_code=destination,
                row_limit=self._config.board_rows,
                time_offset=offset,
                time_window=self._config.time_window_minutes,
            )
        else:
            station, coming_from = (destination, origin) if destination else (origin, None)
            self._write("Fetching live arrival information...")
            self._write("")
            board = await self._boards.fetch_arrival_board(
                station,
                origin_code=coming_from,
                row_limit=self._config.board_rows,
                time_offset=offset,
                time_window=self._config.time_window_minutes,
            )
        await self.show_board(board)

    def _describe_query(self, query: JourneyQuery) -> None:
        self._write("")
        self._write("I understood:")
        if query.departure_station:
            self._write(f"  From: {query.departure_station}")
        if query.destination_station:
            self._write(f"  To: {query.destination_station}")
        if query.preferred_departure_time:
            self._write(f"  Around: {query.preferred_departure_time:%H:%M}")
        if query.preferred_arrival_time:
            self._write(f"  Arriving by: {query.preferred_arrival_time:%H:%M}")
        if not query.is_departure:
            self._write("  Showing: arrivals")
        if query.notes:
            self._write(f"  Notes: {query.notes}")

    def _resolve_with_candidates(self, text: str, station_type: str) -> str | None:
        """Resolve parsed station text, asking the user to pick a candidate by id if needed."""
        resolution = self._resolver.resolve(text)
        if isinstance(resolution, UniqueMatch):
            name = self._directory.name_for_code(resolution.code) or text
            self._write(f"Using: {name} ({resolution.code})")
            return resolution.code
        if isinstance(resolution, NoMatch):
            self._write(f"No stations found matching '{text}'.", "red")
            return None

        results = self._offer_candidates(resolution, self._config.candidate_limit)
        final = self._selector.run(
            results, lambda _state: self._read(f"\nSelect {station_type} station by ID: ")
        )
        if isinstance(final, Selected):
            self._write(f"Selected: {final.station.name} ({final.station.code})", "green")
            return final.station.code
        return None

    # Manual flow

    async def manual_flow(self) -> None:
        """Step-by-step station selection, then the board."""
        origin = self.select_station("Departure")
        if origin is None:
            return

        destination = None
        choice = self._read("\nWould you like to filter by destination? (y/n): ")
        if choice is None:
            return
        if choice.lower() in ("y", "yes"):
            destination = self.select_station("Destination")
            if destination is None and self._input_closed:
                return

        self._write("")
        self._write("Fetching live departure information...")
        self._write("")
        board = await self._boards.fetch_departure_board(
            origin,
            destination_code=destination,
            row_limit=self._config.board_rows,
            time_window=self._config.time_window_minutes,
        )
        await self.show_board(board)

    def select_station(self, station_type: str) -> str | None:
        """Prompt until a station is chosen.

        Returns its CRS code, or None when the user enters nothing, types
        exit/quit, or input ends.
        """
        retry: str | None = None
        while not self._input_closed:
            if retry is None:
                self._write("")
                self._write(f"{station_type} Station Selection:")
                self._write("─" * 33)
                text = self._read(
                    "Enter station name or CRS code "
                    "(or type 'list' to see all stations, 'search' for direct search): "
                )
                if text is None:
                    return None
            else:
                text, retry = retry, None

            command = text.lower()
            if not text or command in EXIT_WORDS:
                return None
            if command == "list":
                state: SelectionState = self._selector.start_listing()
            elif command == "search":
                state = self._selector.start_search()
            else:
                resolution = self._resolver.resolve(text)
                if isinstance(resolution, UniqueMatch):
                    self._announce(resolution.code)
                    return resolution.code
                if isinstance(resolution, NoMatch):
                    self._write(f"No stations found matching '{text}'. Please try again.", "red")
                    continue
                offered = self._offer_candidates(
                    resolution, self._config.search_limit, " Please be more specific."
                )
                reply = self._prompt_for(offered, station_type)
                if reply is None:
                    return None
                final = self._selector.step(offered, reply)
                if isinstance(final, Selected):
                    self._write(f"Selected: {final.station.name} ({final.station.code})", "green")
                    return final.station.code
                # anything but a known id is a new search, blank goes back to the prompt
                retry = reply or None
                continue

            final = self._selector.run(state, lambda current: self._prompt_for(current, station_type))
            if isinstance(final, Selected):
                self._write(f"Selected: {final.station.name} ({final.station.code})", "green")
                return final.station.code
            if isinstance(final, Cancelled) and final.reason and not self._input_closed:
                self._write(final.reason, "red")
        return None

    def _offer_candidates(
        self, candidates: CandidateMatches, limit: int, more_hint: str = ""
    ) -> SearchResults:
        """List the first ``limit`` candidates with their directory ids."""
        results = self._selector.from_candidates(candidates)
        self._offered = results
        self._write("")
        self._write(f"Multiple stations found matching '{candidates.query}':")
        shown = (self._directory.station_by_name(name) for name in candidates.shown(limit))
        self._write_stations([station for station in shown if station is not None])
        hidden = candidates.hidden_count(limit)
        if hidden:
            self._write(f"... and {hidden} more.{more_hint}", "yellow")
        return results

    def _write_stations(self, stations: list[Station]) -> None:
        for station in stations:
            self._write(f"{station.id:>3}. {station.name:<40} ({station.code})")

    def _prompt_for(self, state: SelectionState, station_type: str) -> str | None:
        """Show a non-terminal selection state and read the reply."""
        if isinstance(state, Listing):
            self._terminal.clear()
            self._write(
                f"{station_type} Station Selection - Page {state.page + 1} of {self._selector.total_pages}:"
            )
            self._write(LIGHT_RULE)
            self._write_stations(self._selector.page_stations(state.page))
            self._write(LIGHT_RULE)
            if state.notice:
                self._write(state.notice, "red")
            return self._read(
                "Enter station ID to select, 'n' for next page, 'p' for previous page, "
                "'b' to go back, or 's' to search: "
            )
        if isinstance(state, Searching):
            self._terminal.clear()
            self._write(f"{station_type} Station Search:")
            self._write(LIGHT_RULE)
            return self._read("Enter station name or part of name: ")
        if isinstance(state, SearchResults):
            if state is self._offered:
                return self._read("\nEnter station ID to select, or type a new search: ")
            self._write("")
            self._write(f"Found {len(state.matches)} stations matching '{state.term}':")
            self._write(LIGHT_RULE)
            self._write_stations(list(state.matches))
            self._write(LIGHT_RULE)
            return self._read("Enter station ID to select or press Enter to go back: ")
        return None

    # Boards

    async def show_board(self, board: DepartureBoard | ErrorDetails) -> None:
        """Render a board, then offer the detail view for one of its services."""
        if isinstance(board, ErrorDetails):
            logger.warning(f"Board fetch failed: {board.reason}")
            self._write("Unable to fetch departure information. Please try again.", "red")
            return

        self._write_lines(self._renderer.render_board(board))
        if not board.services:
            return

        self._write("")
        self._write("To view detailed information about a specific train, enter its number.")
        self._write("Or press Enter to return to the main menu.")
        choice = self._read("> ")
        if not choice:
            return
        try:
            number = int(choice)
        except ValueError:
            return
        if not 1 <= number <= len(board.services):
            return

        service_id = board.services[number - 1].service_id
        if not service_id:
            self._write("No details are available for that service.", "yellow")
            return
        await self.show_service_details(service_id)

    async def show_service_details(self, service_id: str) -> None:
        self._terminal.clear()
        self._write("Fetching detailed train journey information...")
        details = await self._boards.fetch_service_details(service_id)
        if isinstance(details, ErrorDetails):
            logger.warning(f"Service details fetch failed: {details.reason}")
            self._write("Unable to fetch train details.", "red")
            return
        self._write_lines(render_service_details(details))
