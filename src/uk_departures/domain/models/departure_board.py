"""Departure board domain model."""

from dataclasses import dataclass, field
from datetime import datetime

from uk_departures.domain.models.service_item import ServiceItem


@dataclass(frozen=True)
class DepartureBoard:
    """Snapshot of upcoming services at a station.

    Services keep the order the feed returned them in.
    """

    generated_at: datetime
    origin_name: str
    origin_code: str
    filter_name: str | None = None
    filter_code: str | None = None
    services: list[ServiceItem] = field(default_factory=list)
    is_arrivals: bool = False
