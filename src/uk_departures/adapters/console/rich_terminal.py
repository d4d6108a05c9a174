"""Terminal adapter backed by rich."""

from rich.console import Console
from rich.markup import escape

from uk_departures.domain.ports.terminal import Terminal


class RichTerminal(Terminal):
    """Line-based terminal using a rich Console for colour output."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False)

    def write(self, text: str = "", style: str | None = None) -> None:
        # Station names and feed text can contain [brackets]; never treat them as markup
        self._console.print(escape(text), style=style)

    def read_line(self, prompt: str = "") -> str | None:
        try:
            return self._console.input(escape(prompt))
        except EOFError:
            return None

    def clear(self) -> None:
        self._console.clear()
