"""Natural-language journey parser adapters."""

from uk_departures.adapters.nl_parser.llm_journey_parser import LlmJourneyParser
from uk_departures.adapters.nl_parser.providers import AiProvider, provider_from_name

__all__ = ["AiProvider", "LlmJourneyParser", "provider_from_name"]
