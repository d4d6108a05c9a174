"""Tests for domain models."""

from datetime import date, datetime, time

import pytest
from pydantic import ValidationError

from uk_departures.domain.models import (
    CallingPoint,
    CandidateMatches,
    DisplayStatus,
    ErrorDetails,
    ErrorKind,
    JourneyQuery,
    ServiceDetails,
    ServiceItem,
    Station,
)


def test_station_creation() -> None:
    """Given station data, when creating a Station, then all fields are set correctly."""
    station = Station(code="PAD", name="London Paddington", id=7)

    assert station.code == "PAD"
    assert station.name == "London Paddington"
    assert station.id == 7


def test_service_item_defaults() -> None:
    """Given only times, when creating a ServiceItem, then optional fields default to empty."""
    item = ServiceItem(scheduled_time="10:00", expected_time="On time")

    assert item.platform is None
    assert item.is_cancelled is False
    assert item.destinations == []
    assert item.origins == []


def test_journey_query_accepts_camel_case_keys() -> None:
    """Given parser output with camelCase keys, when validating, then fields are populated."""
    query = JourneyQuery.model_validate(
        {
            "departureStation": "Paddington",
            "destinationStation": "Bristol",
            "preferredDepartureTime": "15:00",
            "isDeparture": True,
            "journeyDate": "2026-03-01",
            "confidence": 0.8,
            "notes": "around 3pm",
        }
    )

    assert query.departure_station == "Paddington"
    assert query.destination_station == "Bristol"
    assert query.preferred_departure_time == time(15, 0)
    assert query.journey_date == date(2026, 3, 1)
    assert query.confidence == 0.8
    assert query.is_valid


def test_journey_query_blank_departure_is_invalid() -> None:
    """Given a blank departure station, when validating, then the query is not valid."""
    query = JourneyQuery.model_validate({"departureStation": "   ", "destinationStation": "York"})

    assert query.departure_station is None
    assert not query.is_valid


def test_journey_query_defaults() -> None:
    """Given no optional fields, when creating a query, then defaults apply."""
    query = JourneyQuery(departure_station="Leeds")

    assert query.is_departure is True
    assert query.journey_date == date.today()
    assert query.confidence == 1.0
    assert query.preferred_departure_time is None


def test_journey_query_null_direction_means_departure() -> None:
    """Given isDeparture null, when validating, then the query is for departures."""
    query = JourneyQuery.model_validate({"departureStation": "Leeds", "isDeparture": None})

    assert query.is_departure is True


def test_journey_query_unparseable_time_is_dropped() -> None:
    """Given a time the parser could not format, when validating, then the time is None."""
    query = JourneyQuery.model_validate(
        {"departureStation": "Leeds", "preferredDepartureTime": "about three"}
    )

    assert query.preferred_departure_time is None
    assert query.is_valid


def test_journey_query_rejects_confidence_out_of_range() -> None:
    """Given confidence above 1, when validating, then a ValidationError is raised."""
    with pytest.raises(ValidationError):
        JourneyQuery(departure_station="Leeds", confidence=1.5)


def test_candidate_matches_limits() -> None:
    """Given twelve candidates, when limiting to ten, then ten are shown and two are hidden."""
    names = [f"Station {i:02d}" for i in range(12)]
    candidates = CandidateMatches(query="station", names=names)

    assert candidates.shown(10) == names[:10]
    assert candidates.hidden_count(10) == 2
    assert candidates.hidden_count(20) == 0


def test_error_details_defaults_to_external_failure() -> None:
    """Given only a reason, when creating ErrorDetails, then kind is EXTERNAL_FAILURE."""
    error = ErrorDetails(reason="HTTP 503", status_code=503)

    assert error.kind == ErrorKind.EXTERNAL_FAILURE
    assert error.status_code == 503


def test_display_status_values() -> None:
    """Given the display statuses, when rendering them as text, then the board labels are used."""
    assert str(DisplayStatus.ON_TIME) == "On time"
    assert str(DisplayStatus.DELAYED) == "Delayed"
    assert str(DisplayStatus.CANCELLED) == "CANCELLED"


def test_service_details_journey_ends() -> None:
    """Given calling points on both sides, when reading journey ends, then first and last stops are used."""
    details = ServiceDetails(
        generated_at=datetime(2026, 3, 1, 10, 0),
        service_id="abc",
        location_name="Reading",
        crs="RDG",
        previous_calling_points=[
            CallingPoint("London Paddington", "PAD", "09:30", actual_time="09:31"),
            CallingPoint("Slough", "SLO", "09:45", actual_time="09:46"),
        ],
        subsequent_calling_points=[
            CallingPoint("Didcot Parkway", "DID", "10:20", expected_time="On time"),
            CallingPoint("Bristol Temple Meads", "BRI", "11:05", expected_time="On time"),
        ],
    )

    assert details.journey_origin == "London Paddington"
    assert details.journey_destination == "Bristol Temple Meads"


def test_service_details_without_calling_points_has_unknown_ends() -> None:
    """Given no calling points, when reading journey ends, then both are None."""
    details = ServiceDetails(
        generated_at=datetime(2026, 3, 1, 10, 0),
        service_id="abc",
        location_name="Reading",
        crs="RDG",
    )

    assert details.journey_origin is None
    assert details.journey_destination is None
