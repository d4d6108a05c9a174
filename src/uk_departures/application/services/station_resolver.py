"""Resolution of free-text station input to a CRS code."""

import logging
from typing import TYPE_CHECKING

from uk_departures.domain.models import CandidateMatches, NoMatch, Resolution, UniqueMatch

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from uk_departures.domain.models import StationDirectory


class StationResolver:
    """Turns whatever the user typed into a station code, if it can.

    The pipeline runs in a fixed order and the first step that succeeds
    wins: a valid three-letter code, then an exact alias, then a substring
    search over all aliases.
    """

    def __init__(self, directory: "StationDirectory") -> None:
        """Initialize with the station directory to resolve against."""
        self._directory = directory

    def resolve(self, text: str) -> Resolution:
        """Resolve text to a unique code, a list of candidate names, or nothing."""
        query = text.strip()
        if not query:
            return NoMatch(query=query)

        # A valid code wins even when it is also the start of a station name
        if len(query) == 3 and self._directory.is_valid_code(query):
            return UniqueMatch(code=query.upper())

        code = self._directory.resolve_alias(query)
        if code is not None:
            return UniqueMatch(code=code)

        matches = self._directory.search(query)
        if not matches:
            logger.debug(f"No station matches '{query}'")
            return NoMatch(query=query)

        if len(matches) == 1:
            only = self._directory.resolve_alias(matches[0])
            if only is not None:
                return UniqueMatch(code=only)

        logger.debug(f"'{query}' matches {len(matches)} stations")
        return CandidateMatches(query=query, names=matches)
