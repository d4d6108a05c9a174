#!/usr/bin/env python3
"""Check that every station code in the directory answers with a live board."""

import argparse
import asyncio
import sys
from pathlib import Path

import aiohttp

# Add src to path
script_dir = Path(__file__).parent
project_dir = script_dir.parent
sys.path.insert(0, str(project_dir / "src"))

from uk_departures.adapters.config import AppConfig, StationDirectoryLoader
from uk_departures.adapters.darwin_api import DarwinBoardRepository
from uk_departures.domain.models import ErrorDetails


async def check_stations(stations_file: str | None, delay_seconds: float) -> None:
    """Fetch a one-row board for each distinct code and report failures."""
    if stations_file and not Path(stations_file).exists():
        print(f"ERROR: Stations file '{stations_file}' not found", file=sys.stderr)
        sys.exit(1)

    config = AppConfig(stations_file=stations_file)
    if not config.darwin_api_token:
        print("ERROR: DARWIN_API_TOKEN is not set", file=sys.stderr)
        sys.exit(1)

    directory = StationDirectoryLoader.load(config)
    codes: dict[str, str] = {}
    for name, code in directory.aliases():
        codes.setdefault(code, name)

    print(f"Found {len(codes)} station code(s) to check\n")

    results: list[tuple[str, str, str | None]] = []
    async with aiohttp.ClientSession() as session:
        repository = DarwinBoardRepository(
            session,
            config.darwin_api_token,
            base_url=config.darwin_base_url,
            timeout_seconds=config.darwin_api_timeout,
        )
        for code, name in codes.items():
            print(f"Checking: {name} ({code})", end=" ... ")
            sys.stdout.flush()

            board = await repository.fetch_departure_board(code, row_limit=1)
            if isinstance(board, ErrorDetails):
                print(f"✗ FAILED: {board.reason}")
                results.append((code, name, board.reason))
            else:
                print(f"✓ OK ({board.origin_name})")
                results.append((code, name, None))

            if delay_seconds:
                await asyncio.sleep(delay_seconds)

    failed = [r for r in results if r[2] is not None]

    print("\n" + "=" * 80)
    print("SUMMARY")
    print("=" * 80)
    print(f"\nSuccessful: {len(results) - len(failed)}/{len(results)}")

    if failed:
        print(f"\nFailed: {len(failed)}/{len(results)}")
        for code, name, error in failed:
            print(f"  ✗ {name} ({code}): {error}")
        sys.exit(1)

    print("\nAll stations are accessible! ✓")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Check that every station code in the directory can be queried"
    )
    parser.add_argument(
        "--stations-file",
        help="Optional TOML file with extra [[stations]] aliases",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.5,
        help="Seconds to wait between requests",
    )

    args = parser.parse_args()

    asyncio.run(check_stations(args.stations_file, args.delay))
