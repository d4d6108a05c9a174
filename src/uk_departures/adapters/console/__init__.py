"""Console adapters."""

from uk_departures.adapters.console.rich_terminal import RichTerminal

__all__ = ["RichTerminal"]
