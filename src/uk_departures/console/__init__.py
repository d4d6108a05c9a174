"""Interactive console front end."""

from uk_departures.console.board_renderer import BoardRenderer, RenderedLine, render_service_details
from uk_departures.console.journey_console import JourneyConsole

__all__ = ["BoardRenderer", "JourneyConsole", "RenderedLine", "render_service_details"]
