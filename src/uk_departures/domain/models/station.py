"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents a station entry in the station directory.

    The id is the station's position in the name-sorted directory, numbered
    from 1. It is only stable within one directory snapshot and is not the
    CRS code: several names may share one code.
    """

    code: str
    name: str
    id: int
