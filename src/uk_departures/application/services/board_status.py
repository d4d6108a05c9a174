"""Derived status and display strings for board services.

All functions here are pure and work on one service at a time.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from uk_departures.domain.models import DisplayStatus, ServiceItem, ServiceLocation, ServiceStatus

UNKNOWN_LOCATION = "Unknown"
LOCATION_SEPARATOR = " & "
ELLIPSIS = "..."


def derive_status(item: ServiceItem) -> DisplayStatus:
    """Derive the display status of a service.

    Literal markers in the expected time are checked before comparing it
    with the scheduled time: some feeds put "Cancelled" or "Delayed" there
    instead of setting a flag.
    """
    if item.is_cancelled:
        return DisplayStatus.CANCELLED

    expected = item.expected_time or ""
    marker = expected.casefold()

    if marker == "on time":
        return DisplayStatus.ON_TIME
    if marker == "cancelled":
        return DisplayStatus.CANCELLED
    if marker == "delayed":
        return DisplayStatus.DELAYED
    if expected and expected != item.scheduled_time:
        return DisplayStatus.DELAYED
    return DisplayStatus.ON_TIME


def describe_status(item: ServiceItem) -> ServiceStatus:
    """Derive the display status together with the feed's reason for it."""
    status = derive_status(item)
    if status is DisplayStatus.CANCELLED:
        return ServiceStatus(status=status, reason=item.cancel_reason)
    if status is DisplayStatus.DELAYED:
        return ServiceStatus(status=status, reason=item.delay_reason)
    return ServiceStatus(status=status)


def format_locations(locations: Sequence[ServiceLocation] | None) -> str:
    """Join location names with " & ", keeping their order."""
    if not locations:
        return UNKNOWN_LOCATION
    return LOCATION_SEPARATOR.join(
        location.location_name or UNKNOWN_LOCATION for location in locations
    )


def destination_text(item: ServiceItem) -> str:
    return format_locations(item.destinations)


def origin_text(item: ServiceItem) -> str:
    return format_locations(item.origins)


def truncate(text: str, limit: int, keep: int) -> str:
    """Cut text longer than ``limit`` down to ``keep`` characters plus an ellipsis."""
    if len(text) > limit:
        return text[:keep] + ELLIPSIS
    return text


@dataclass(frozen=True)
class BoardLayout:
    """Column limits for the board table."""

    location_limit: int = 24
    location_keep: int = 21
    operator_limit: int = 14
    operator_keep: int = 11

    def location(self, text: str) -> str:
        return truncate(text, self.location_limit, self.location_keep)

    def operator(self, text: str) -> str:
        return truncate(text, self.operator_limit, self.operator_keep)


STANDARD_LAYOUT = BoardLayout()
WIDE_LAYOUT = BoardLayout(operator_limit=19, operator_keep=16)
