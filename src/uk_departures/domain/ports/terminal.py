"""Terminal port."""

from typing import Protocol


class Terminal(Protocol):
    """Port for line-based interaction with the user."""

    def write(self, text: str = "", style: str | None = None) -> None:
        """Write one line of text, optionally styled."""
        ...

    def read_line(self, prompt: str = "") -> str | None:
        """Read one line of input. Returns None when input is exhausted."""
        ...

    def clear(self) -> None:
        """Clear the screen."""
        ...
