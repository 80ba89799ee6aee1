"""projdeck - a session-scoped project list for the terminal."""

__version__ = "0.1.0"
