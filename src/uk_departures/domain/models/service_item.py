"""Service item domain model."""

from dataclasses import dataclass, field

from uk_departures.domain.models.service_location import ServiceLocation


@dataclass(frozen=True)
class ServiceItem:
    """Represents a single service row on a departure or arrival board.

    Times are kept as the feed sends them ("14:05", "On time", "Delayed",
    "Cancelled"). On arrival boards they hold the arrival times.
    """

    scheduled_time: str | None
    expected_time: str | None
    platform: str | None = None
    operator_name: str | None = None
    is_cancelled: bool = False
    cancel_reason: str | None = None
    delay_reason: str | None = None
    service_id: str | None = None
    destinations: list[ServiceLocation] = field(default_factory=list)
    origins: list[ServiceLocation] = field(default_factory=list)
