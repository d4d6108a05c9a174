"""Main entry point for the interactive UK departures console."""

import asyncio
import logging
import os
import sys

import aiohttp

from uk_departures.adapters.config import AppConfig, StationDirectoryLoader
from uk_departures.adapters.console import RichTerminal
from uk_departures.adapters.darwin_api import DarwinBoardRepository
from uk_departures.adapters.nl_parser import LlmJourneyParser, provider_from_name
from uk_departures.console import JourneyConsole

# Configure logging; the board shares the terminal, so stay quiet by default
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "WARNING").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    try:
        config = AppConfig()
        directory = StationDirectoryLoader.load(config)
    except (OSError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    if not config.darwin_api_token:
        logger.error("DARWIN_API_TOKEN is not set.")
        logger.error("Set it in the environment or in a .env file in the working directory.")
        logger.error("See .env.example for the required format.")
        sys.exit(1)

    logger.info(f"Loaded {len(directory)} station aliases")

    async with aiohttp.ClientSession() as session:
        boards = DarwinBoardRepository(
            session,
            config.darwin_api_token,
            base_url=config.darwin_base_url,
            timeout_seconds=config.darwin_api_timeout,
        )
        parser = LlmJourneyParser(
            session,
            config.ai_api_key,
            provider=provider_from_name(config.ai_provider),
            model=config.ai_model,
            timeout_seconds=config.ai_timeout,
        )
        if not parser.is_enabled:
            logger.info("No AI API key configured; natural-language queries are disabled")

        journey_console = JourneyConsole(directory, boards, parser, RichTerminal(), config)
        try:
            await journey_console.run()
        except KeyboardInterrupt:
            logger.info("Shutting down...")


def cli_main() -> None:
    """Synchronous entry point for the console command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
