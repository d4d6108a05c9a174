"""Service location domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceLocation:
    """An origin or destination of a service."""

    location_name: str | None
    crs: str | None
    via: str | None = None  # e.g. "via Bath Spa"
