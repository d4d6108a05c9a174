"""Scriptable command line for station lookups and live boards."""

import asyncio
import json
import sys
from dataclasses import asdict
from typing import Any

import aiohttp

from uk_departures.adapters.config import AppConfig, StationDirectoryLoader
from uk_departures.adapters.darwin_api import DarwinBoardRepository
from uk_departures.application.services import (
    STANDARD_LAYOUT,
    WIDE_LAYOUT,
    StationResolver,
    StationSelector,
)
from uk_departures.console.board_renderer import BoardRenderer, render_service_details
from uk_departures.domain.models import (
    CandidateMatches,
    DepartureBoard,
    ErrorDetails,
    NoMatch,
    StationDirectory,
    UniqueMatch,
)


def _to_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def resolve_station_or_exit(resolver: StationResolver, text: str) -> str:
    """Resolve text to a CRS code, or print why it could not be and exit with status 1."""
    resolution = resolver.resolve(text)
    if isinstance(resolution, UniqueMatch):
        return resolution.code
    if isinstance(resolution, NoMatch):
        print(f"No stations found matching '{text}'", file=sys.stderr)
        sys.exit(1)

    print(f"'{text}' is ambiguous. Did you mean one of:", file=sys.stderr)
    for name in resolution.names:
        print(f"  {name}", file=sys.stderr)
    sys.exit(1)


def print_search(directory: StationDirectory, term: str, as_json: bool = False) -> None:
    stations = directory.search_stations(term)
    if as_json:
        print(_to_json([asdict(station) for station in stations]))
        return
    if not stations:
        print(f"No stations found matching '{term}'", file=sys.stderr)
        sys.exit(1)
    print(f"\nFound {len(stations)} station(s) matching '{term}':\n")
    for station in stations:
        print(f"{station.id:>3}. {station.name:<40} ({station.code})")


def print_stations_page(directory: StationDirectory, page: int, page_size: int) -> None:
    """Print one page (1-based) of the station listing."""
    selector = StationSelector(directory, page_size=page_size)
    if not 1 <= page <= selector.total_pages:
        print(f"Page must be between 1 and {selector.total_pages}", file=sys.stderr)
        sys.exit(1)
    print(f"\nStations - Page {page} of {selector.total_pages}:")
    print("─" * 80)
    for station in selector.page_stations(page - 1):
        print(f"{station.id:>3}. {station.name:<40} ({station.code})")
    print("─" * 80)


def print_resolution(directory: StationDirectory, text: str) -> None:
    resolution = StationResolver(directory).resolve(text)
    if isinstance(resolution, UniqueMatch):
        name = directory.name_for_code(resolution.code) or resolution.code
        print(f"{resolution.code}  {name}")
    elif isinstance(resolution, CandidateMatches):
        print(f"{len(resolution.names)} candidates for '{text}':")
        for name in resolution.names:
            print(f"  {name} ({directory.resolve_alias(name)})")
    else:
        print(f"No stations found matching '{text}'", file=sys.stderr)
        sys.exit(1)


def print_board(board: DepartureBoard | ErrorDetails, config: AppConfig, as_json: bool = False) -> None:
    if isinstance(board, ErrorDetails):
        print(f"Unable to fetch board: {board.reason}", file=sys.stderr)
        sys.exit(1)
    if as_json:
        print(_to_json(asdict(board)))
        return
    renderer = BoardRenderer(WIDE_LAYOUT if config.wide_layout else STANDARD_LAYOUT)
    for line in renderer.render_board(board):
        print(line.text)


async def fetch_board(
    config: AppConfig,
    directory: StationDirectory,
    station: str,
    to: str | None = None,
    rows: int | None = None,
    arrivals: bool = False,
) -> DepartureBoard | ErrorDetails:
    """Resolve the station names and fetch a departure or arrival board."""
    resolver = StationResolver(directory)
    code = resolve_station_or_exit(resolver, station)
    other = resolve_station_or_exit(resolver, to) if to else None
    row_limit = rows or config.board_rows

    async with aiohttp.ClientSession() as session:
        repository = DarwinBoardRepository(
            session,
            config.darwin_api_token,
            base_url=config.darwin_base_url,
            timeout_seconds=config.darwin_api_timeout,
        )
        if arrivals:
            return await repository.fetch_arrival_board(
                code,
                origin_code=other,
                row_limit=row_limit,
                time_window=config.time_window_minutes,
            )
        return await repository.fetch_departure_board(
            code,
            destination_code=other,
            row_limit=row_limit,
            time_window=config.time_window_minutes,
        )


async def show_service(config: AppConfig, service_id: str) -> None:
    async with aiohttp.ClientSession() as session:
        repository = DarwinBoardRepository(
            session,
            config.darwin_api_token,
            base_url=config.darwin_base_url,
            timeout_seconds=config.darwin_api_timeout,
        )
        details = await repository.fetch_service_details(service_id)
    if isinstance(details, ErrorDetails):
        print(f"Unable to fetch service {service_id}: {details.reason}", file=sys.stderr)
        sys.exit(1)
    for line in render_service_details(details):
        print(line.text)


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="UK Departures command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search the station directory
  uk-departures-cli search "kings"

  # Browse the directory
  uk-departures-cli stations --page 2

  # See how a name resolves
  uk-departures-cli resolve "Waterloo"

  # Live departures from Paddington calling at Reading
  uk-departures-cli board paddington --to reading

  # Calling points of a service from a board
  uk-departures-cli service <service-id>
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search stations by name")
    search_parser.add_argument("term", help="Part of a station name")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    stations_parser = subparsers.add_parser("stations", help="List the station directory")
    stations_parser.add_argument("--page", type=int, default=1, help="Page number (1-based)")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a name or CRS code")
    resolve_parser.add_argument("text", help="Station name, alias, or CRS code")

    board_parser = subparsers.add_parser("board", help="Show a live board")
    board_parser.add_argument("station", help="Station name or CRS code")
    board_parser.add_argument("--to", help="Only services calling at (or coming from) this station")
    board_parser.add_argument("--rows", type=int, help="Number of services to fetch")
    board_parser.add_argument("--arrivals", action="store_true", help="Show arrivals instead")
    board_parser.add_argument("--json", action="store_true", help="Output as JSON")

    service_parser = subparsers.add_parser("service", help="Show calling points of a service")
    service_parser.add_argument("service_id", help="Service ID from a board")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig()
        directory = StationDirectoryLoader.load(config)

        if args.command == "search":
            print_search(directory, args.term, as_json=args.json)

        elif args.command == "stations":
            print_stations_page(directory, args.page, config.page_size)

        elif args.command == "resolve":
            print_resolution(directory, args.text)

        elif args.command == "board":
            board = await fetch_board(
                config,
                directory,
                args.station,
                to=args.to,
                rows=args.rows,
                arrivals=args.arrivals,
            )
            print_board(board, config, as_json=args.json)

        elif args.command == "service":
            await show_service(config, args.service_id)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
