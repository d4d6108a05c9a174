"""Domain layer - core models and ports."""

from uk_departures.domain.models import (
    DepartureBoard,
    JourneyQuery,
    ServiceItem,
    Station,
)
from uk_departures.domain.ports import (
    BoardRepository,
    JourneyParser,
    Terminal,
)

__all__ = [
    "BoardRepository",
    "DepartureBoard",
    "JourneyParser",
    "JourneyQuery",
    "ServiceItem",
    "Station",
    "Terminal",
]
