"""Renders boards and service details as styled text lines."""

from dataclasses import dataclass

from uk_departures.application.services.board_status import (
    STANDARD_LAYOUT,
    BoardLayout,
    describe_status,
    destination_text,
    origin_text,
)
from uk_departures.domain.models import (
    DepartureBoard,
    DisplayStatus,
    ServiceDetails,
    ServiceItem,
)

HEAVY_RULE = "═" * 80
LIGHT_RULE = "─" * 80

STATUS_STYLES = {
    DisplayStatus.CANCELLED: "red",
    DisplayStatus.DELAYED: "yellow",
    DisplayStatus.ON_TIME: "white",
}

REASON_LABELS = {
    DisplayStatus.CANCELLED: ("Cancellation", "dark_red"),
    DisplayStatus.DELAYED: ("Delay", "dark_goldenrod"),
}

NO_SERVICES_HELP = [
    "",
    "No services found.",
    "This could be due to one of the following reasons:",
    "1. There are no scheduled services at this time",
    "2. The station code may not match exactly with what the National Rail API expects",
    "3. The National Rail API data feed might be temporarily unavailable",
    "",
    "Try a different station or try again later.",
]


@dataclass(frozen=True)
class RenderedLine:
    """One line of output and the style to print it with."""

    text: str
    style: str | None = None


def _or(value: str | None, fallback: str) -> str:
    return value if value else fallback


class BoardRenderer:
    """Formats boards into fixed-width columns."""

    def __init__(self, layout: BoardLayout = STANDARD_LAYOUT) -> None:
        self._layout = layout
        self._operator_width = layout.operator_limit + 1

    def table_header(self, is_arrivals: bool = False) -> str:
        location = "Origin" if is_arrivals else "Destination"
        return (
            f"{'#':<3} {location:<25} {'Sch':<6} {'Exp':<6} {'Plat':<5} "
            f"{'Status':<12} {'Operator':<{self._operator_width}}"
        )

    def service_row(self, index: int, item: ServiceItem, is_arrivals: bool = False) -> str:
        """Format one service as a table row."""
        location = origin_text(item) if is_arrivals else destination_text(item)
        status = describe_status(item).status
        operator = self._layout.operator(_or(item.operator_name, "Unknown"))
        return (
            f"{index:<3} {self._layout.location(location):<25} "
            f"{_or(item.scheduled_time, 'N/A'):<6} {_or(item.expected_time, 'N/A'):<6} "
            f"{_or(item.platform, 'TBC'):<5} {status:<12} {operator:<{self._operator_width}}"
        )

    def render_header(self, board: DepartureBoard) -> list[RenderedLine]:
        title = "Arrivals at" if board.is_arrivals else "Departures from"
        lines = [
            RenderedLine(f"{title}: {board.origin_name} ({board.origin_code})", "green"),
            RenderedLine(f"Date: {board.generated_at:%d %b %Y}", "green"),
        ]
        if board.filter_name:
            label = "Coming from" if board.is_arrivals else "Calling at"
            lines.append(RenderedLine(f"{label}: {board.filter_name}", "green"))
        lines.append(RenderedLine(f"Generated at: {board.generated_at:%H:%M:%S}", "green"))
        return lines

    def render_board(self, board: DepartureBoard) -> list[RenderedLine]:
        """Render the board header, rows, and any cancellation/delay reasons."""
        lines = self.render_header(board)
        if not board.services:
            lines.extend(RenderedLine(text) for text in NO_SERVICES_HELP)
            return lines

        lines.append(RenderedLine(""))
        lines.append(RenderedLine(HEAVY_RULE))
        lines.append(RenderedLine(self.table_header(board.is_arrivals)))
        lines.append(RenderedLine(HEAVY_RULE))

        for index, item in enumerate(board.services, start=1):
            status = describe_status(item)
            lines.append(
                RenderedLine(
                    self.service_row(index, item, board.is_arrivals), STATUS_STYLES[status.status]
                )
            )
            if status.reason:
                label, style = REASON_LABELS[status.status]
                lines.append(RenderedLine(f"  → {label}: {status.reason}", style))

        lines.append(RenderedLine(HEAVY_RULE))
        return lines


def details_status_text(details: ServiceDetails) -> str:
    """Status line for the viewed station: the raw expected time when it is not "On time"."""
    if details.is_cancelled:
        return DisplayStatus.CANCELLED.value
    for expected in (details.expected_departure, details.expected_arrival):
        if expected and expected != "On time":
            return expected
    return DisplayStatus.ON_TIME.value


def render_service_details(details: ServiceDetails) -> list[RenderedLine]:
    """Render a read-only itinerary of a service around the viewed station."""
    status = details_status_text(details)
    lines = [
        RenderedLine(""),
        RenderedLine(f"{_or(details.operator_name, 'Unknown operator')} Service", "cyan"),
        RenderedLine(HEAVY_RULE, "cyan"),
        RenderedLine(
            f"Journey: {_or(details.journey_origin, 'Unknown Origin')} → "
            f"{_or(details.journey_destination, 'Unknown Destination')}",
            "cyan",
        ),
        RenderedLine(f"Date: {details.generated_at:%d %b %Y}", "cyan"),
        RenderedLine(f"Train ID: {details.service_id}", "cyan"),
        RenderedLine(f"Service Type: {_or(details.service_type, 'Unknown')}"),
        RenderedLine(""),
        RenderedLine(f"Current Station: {details.location_name} ({details.crs})"),
    ]
    if details.platform:
        lines.append(RenderedLine(f"Platform: {details.platform}"))
    lines.append(RenderedLine(f"Status: {status}"))
    if details.delay_reason:
        lines.append(RenderedLine(f"Delay Reason: {details.delay_reason}", "yellow"))
    if details.cancel_reason:
        lines.append(RenderedLine(f"Cancellation Reason: {details.cancel_reason}", "red"))

    lines.extend(
        [
            RenderedLine(""),
            RenderedLine("Complete Journey:"),
            RenderedLine(LIGHT_RULE),
            RenderedLine(f"{'Station':<30} {'Scheduled':<10} {'Expected':<10} {'Status':<10}"),
            RenderedLine(LIGHT_RULE),
        ]
    )
    for stop in details.previous_calling_points:
        lines.append(
            RenderedLine(
                f"{stop.location_name:<30} {_or(stop.scheduled_time, 'N/A'):<10} "
                f"{_or(stop.actual_time, 'N/A'):<10} {'Departed':<10}",
                "dark_green",
            )
        )

    current_scheduled = details.scheduled_departure or details.scheduled_arrival or "N/A"
    current_expected = details.expected_departure or details.expected_arrival or "N/A"
    lines.append(
        RenderedLine(
            f"{details.location_name:<30} {current_scheduled:<10} {current_expected:<10} "
            f"{status:<10} <-- YOU ARE HERE",
            "bold white",
        )
    )

    for stop in details.subsequent_calling_points:
        lines.append(
            RenderedLine(
                f"{stop.location_name:<30} {_or(stop.scheduled_time, 'N/A'):<10} "
                f"{_or(stop.expected_time, 'N/A'):<10} {'Expected':<10}",
                "yellow",
            )
        )
    lines.append(RenderedLine(LIGHT_RULE))

    lines.append(RenderedLine(""))
    lines.append(RenderedLine("Additional Information:"))
    if details.coach_count is not None:
        lines.append(RenderedLine(f"Train Formation: {details.coach_count} coaches"))
    if details.rsid:
        lines.append(RenderedLine(f"RSID: {details.rsid}"))
    return lines
