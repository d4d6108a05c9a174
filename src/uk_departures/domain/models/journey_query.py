"""Journey query domain model produced by the natural-language parser."""

from datetime import date, time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

ARRIVAL_WORDS = ("false", "no", "0", "arrival", "arrivals", "arriving")


class JourneyQuery(BaseModel):
    """A structured journey request extracted from free text.

    Accepts the camelCase keys the parser emits ("departureStation", ...)
    as well as the Python field names. Only a departure station is required
    for the query to be usable; everything else is best effort.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    departure_station: str | None = None
    destination_station: str | None = None
    preferred_departure_time: time | None = None
    preferred_arrival_time: time | None = None
    is_departure: bool = True
    journey_date: date = Field(default_factory=date.today)
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    notes: str | None = None

    @field_validator("departure_station", "destination_station", "notes", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Treat empty or whitespace-only strings as missing."""
        if isinstance(v, str):
            return v.strip() or None
        return v

    @field_validator("preferred_departure_time", "preferred_arrival_time", mode="before")
    @classmethod
    def parse_time_of_day(cls, v: Any) -> time | None:
        """Parse "HH:mm" strings; anything unparseable is dropped."""
        if v is None or isinstance(v, time):
            return v
        if isinstance(v, str):
            try:
                return time.fromisoformat(v.strip())
            except ValueError:
                return None
        return None

    @field_validator("is_departure", mode="before")
    @classmethod
    def default_direction(cls, v: Any) -> bool:
        """Only an explicit arrival answer switches to arrivals; anything else means departures."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            return v.strip().lower() not in ARRIVAL_WORDS
        return True

    @property
    def is_valid(self) -> bool:
        """A query is usable only when a departure station was extracted."""
        return bool(self.departure_station)
