"""Display status domain models."""

from dataclasses import dataclass
from enum import StrEnum


class DisplayStatus(StrEnum):
    """Status shown for a service on the board."""

    ON_TIME = "On time"
    DELAYED = "Delayed"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class ServiceStatus:
    """Display status plus the reason the feed gave for it, if any."""

    status: DisplayStatus
    reason: str | None = None
