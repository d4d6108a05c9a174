"""Station directory: alias names, CRS codes and numbered stations."""

import logging
from collections.abc import Iterable

from uk_departures.domain.models.station import Station

logger = logging.getLogger(__name__)


def _alphabetical(name: str) -> tuple[str, str]:
    return (name.casefold(), name)


class StationDirectory:
    """Immutable lookup table of station aliases.

    Built once from ordered ``(alias, code)`` pairs. Several aliases may map
    to the same code ("King's Cross" and "Kings Cross" are both KGX). The
    numbered station list has one entry per alias, sorted by name, with ids
    1..N in that order.
    """

    def __init__(self, aliases: Iterable[tuple[str, str]]) -> None:
        table: dict[str, str] = {}
        for name, code in aliases:
            if name in table:
                logger.warning(f"Ignoring duplicate station alias '{name}' ({code})")
                continue
            table[name] = code.upper()
        self._aliases = table
        self._folded = {name.casefold(): name for name in reversed(table)}
        self._codes = frozenset(table.values())
        self._stations = tuple(
            Station(code=table[name], name=name, id=index)
            for index, name in enumerate(sorted(table, key=_alphabetical), start=1)
        )
        self._by_id = {station.id: station for station in self._stations}
        self._by_name = {station.name: station for station in self._stations}

    def __len__(self) -> int:
        return len(self._aliases)

    def aliases(self) -> list[tuple[str, str]]:
        """Return the ``(alias, code)`` pairs in construction order."""
        return list(self._aliases.items())

    def resolve_alias(self, name: str) -> str | None:
        """Return the code for an alias, exact match first, then ignoring case."""
        code = self._aliases.get(name)
        if code is not None:
            return code
        alias = self._folded.get(name.casefold())
        return self._aliases[alias] if alias is not None else None

    def name_for_code(self, code: str) -> str | None:
        """Return the first alias (in construction order) for a code."""
        wanted = code.upper()
        for name, alias_code in self._aliases.items():
            if alias_code == wanted:
                return name
        return None

    def is_valid_code(self, code: str) -> bool:
        """Check whether a code belongs to any alias, ignoring case."""
        return code.upper() in self._codes

    def search(self, term: str) -> list[str]:
        """Return aliases containing ``term`` (ignoring case), alphabetically.

        A blank term returns every alias.
        """
        needle = term.strip().casefold()
        return sorted(
            (name for name in self._aliases if needle in name.casefold()),
            key=_alphabetical,
        )

    def all_stations(self) -> list[Station]:
        """Return every station, sorted by name, with ids 1..N."""
        return list(self._stations)

    def station_by_id(self, station_id: int) -> Station | None:
        """Look up a station by its directory id."""
        return self._by_id.get(station_id)

    def station_by_name(self, name: str) -> Station | None:
        """Look up a station by its exact name."""
        return self._by_name.get(name)

    def search_stations(self, term: str) -> list[Station]:
        """Return stations whose name contains ``term``, ignoring case, by name."""
        needle = term.strip().casefold()
        return [station for station in self._stations if needle in station.name.casefold()]
