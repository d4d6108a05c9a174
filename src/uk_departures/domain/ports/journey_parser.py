"""Journey parser port."""

from typing import Protocol

from uk_departures.domain.models.journey_query import JourneyQuery


class JourneyParser(Protocol):
    """Port for turning a natural-language request into a JourneyQuery."""

    @property
    def is_enabled(self) -> bool:
        """Whether the parser can be used at all."""
        ...

    async def parse_query(self, text: str) -> JourneyQuery | None:
        """Parse free text. Returns None when parsing failed."""
        ...
