"""Service details domain models."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class CallingPoint:
    """A stop a service calls at before or after the viewed station."""

    location_name: str
    crs: str | None
    scheduled_time: str | None
    actual_time: str | None = None
    expected_time: str | None = None
    is_cancelled: bool = False


@dataclass(frozen=True)
class ServiceDetails:
    """Full itinerary of one service as seen from a single station."""

    generated_at: datetime
    service_id: str
    location_name: str
    crs: str
    operator_name: str | None = None
    service_type: str | None = None
    platform: str | None = None
    is_cancelled: bool = False
    cancel_reason: str | None = None
    delay_reason: str | None = None
    scheduled_departure: str | None = None
    expected_departure: str | None = None
    scheduled_arrival: str | None = None
    expected_arrival: str | None = None
    previous_calling_points: list[CallingPoint] = field(default_factory=list)
    subsequent_calling_points: list[CallingPoint] = field(default_factory=list)
    coach_count: int | None = None
    rsid: str | None = None

    @property
    def journey_origin(self) -> str | None:
        """Name of the first stop of the service, if known."""
        if self.previous_calling_points:
            return self.previous_calling_points[0].location_name
        return None

    @property
    def journey_destination(self) -> str | None:
        """Name of the last stop of the service, if known."""
        if self.subsequent_calling_points:
            return self.subsequent_calling_points[-1].location_name
        return None
