"""Parser for Live Departure Boards JSON responses."""

import logging
from datetime import datetime
from typing import Any

from uk_departures.domain.models.departure_board import DepartureBoard
from uk_departures.domain.models.service_details import CallingPoint, ServiceDetails
from uk_departures.domain.models.service_item import ServiceItem
from uk_departures.domain.models.service_location import ServiceLocation

logger = logging.getLogger(__name__)


def _text(value: Any) -> str | None:
    """Return a stripped string, or None for missing/blank values."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class BoardParser:
    """Parses LDBWS board and service responses into domain objects."""

    @staticmethod
    def parse_board(data: dict[str, Any], is_arrivals: bool = False) -> DepartureBoard:
        """Parse a GetDepartureBoard/GetArrivalBoard response.

        Args:
            data: Decoded JSON response.
            is_arrivals: Whether the board lists arrivals (sta/eta) instead of departures.

        Returns:
            DepartureBoard with services in feed order.
        """
        services = [
            BoardParser._parse_service(service, is_arrivals)
            for service in data.get("trainServices") or []
            if isinstance(service, dict)
        ]

        return DepartureBoard(
            generated_at=BoardParser._parse_generated_at(data.get("generatedAt")),
            origin_name=_text(data.get("locationName")) or "",
            origin_code=_text(data.get("crs")) or "",
            filter_name=_text(data.get("filterLocationName")),
            filter_code=_text(data.get("filtercrs") or data.get("filterCrs")),
            services=services,
            is_arrivals=is_arrivals,
        )

    @staticmethod
    def parse_service_details(data: dict[str, Any], service_id: str) -> ServiceDetails:
        """Parse a GetServiceDetails response."""
        formation = data.get("formation") or {}
        coaches = formation.get("coaches") if isinstance(formation, dict) else None

        return ServiceDetails(
            generated_at=BoardParser._parse_generated_at(data.get("generatedAt")),
            service_id=service_id,
            location_name=_text(data.get("locationName")) or "",
            crs=_text(data.get("crs")) or "",
            operator_name=_text(data.get("operator")),
            service_type=_text(data.get("serviceType")),
            platform=_text(data.get("platform")),
            is_cancelled=bool(data.get("isCancelled", False)),
            cancel_reason=_text(data.get("cancelReason")),
            delay_reason=_text(data.get("delayReason")),
            scheduled_departure=_text(data.get("std")),
            expected_departure=_text(data.get("etd")),
            scheduled_arrival=_text(data.get("sta")),
            expected_arrival=_text(data.get("eta")),
            previous_calling_points=BoardParser._parse_calling_points(
                data.get("previousCallingPoints")
            ),
            subsequent_calling_points=BoardParser._parse_calling_points(
                data.get("subsequentCallingPoints")
            ),
            coach_count=len(coaches) if isinstance(coaches, list) else None,
            rsid=_text(data.get("rsid")),
        )

    @staticmethod
    def _parse_service(service: dict[str, Any], is_arrivals: bool) -> ServiceItem:
        """Parse one entry of trainServices."""
        scheduled_key, expected_key = ("sta", "eta") if is_arrivals else ("std", "etd")
        return ServiceItem(
            scheduled_time=_text(service.get(scheduled_key)),
            expected_time=_text(service.get(expected_key)),
            platform=_text(service.get("platform")),
            operator_name=_text(service.get("operator")),
            is_cancelled=bool(service.get("isCancelled", False)),
            cancel_reason=_text(service.get("cancelReason")),
            delay_reason=_text(service.get("delayReason")),
            service_id=_text(service.get("serviceID") or service.get("serviceId")),
            destinations=BoardParser._parse_locations(service.get("destination")),
            origins=BoardParser._parse_locations(service.get("origin")),
        )

    @staticmethod
    def _parse_locations(locations: Any) -> list[ServiceLocation]:
        if not isinstance(locations, list):
            return []
        return [
            ServiceLocation(
                location_name=_text(location.get("locationName")),
                crs=_text(location.get("crs")),
                via=_text(location.get("via")),
            )
            for location in locations
            if isinstance(location, dict)
        ]

    @staticmethod
    def _parse_calling_points(legs: Any) -> list[CallingPoint]:
        """Flatten the per-leg calling point lists into one ordered list."""
        if not isinstance(legs, list):
            return []

        points: list[CallingPoint] = []
        for leg in legs:
            if not isinstance(leg, dict):
                continue
            for stop in leg.get("callingPoint") or []:
                if not isinstance(stop, dict):
                    continue
                points.append(
                    CallingPoint(
                        location_name=_text(stop.get("locationName")) or "Unknown",
                        crs=_text(stop.get("crs")),
                        scheduled_time=_text(stop.get("st")),
                        actual_time=_text(stop.get("at")),
                        expected_time=_text(stop.get("et")),
                        is_cancelled=bool(stop.get("isCancelled", False)),
                    )
                )
        return points

    @staticmethod
    def _parse_generated_at(value: Any) -> datetime:
        """Parse the ISO 8601 generatedAt timestamp, falling back to now."""
        if isinstance(value, str) and value:
            try:
                return datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                logger.warning(f"Could not parse generatedAt '{value}'")
        return datetime.now().astimezone()
