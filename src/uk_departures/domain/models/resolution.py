"""Outcomes of resolving free text to a station code."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UniqueMatch:
    """The text resolved to exactly one CRS code."""

    code: str


@dataclass(frozen=True)
class CandidateMatches:
    """The text matched several aliases; the user has to pick one.

    ``names`` always holds the complete, alphabetically ordered list. How
    many of them get shown is up to the caller.
    """

    query: str
    names: list[str]

    def shown(self, limit: int) -> list[str]:
        """Return the first ``limit`` candidate names."""
        return self.names[:limit]

    def hidden_count(self, limit: int) -> int:
        """Return how many candidates fall beyond ``limit``."""
        return max(0, len(self.names) - limit)


@dataclass(frozen=True)
class NoMatch:
    """Nothing in the directory matched the text."""

    query: str


Resolution = UniqueMatch | CandidateMatches | NoMatch
