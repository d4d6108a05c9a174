"""Live UK rail departure boards for the terminal."""

__version__ = "0.1.0"
