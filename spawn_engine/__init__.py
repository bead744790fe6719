"""Spawn location allocation for real-time-strategy player bases."""

__version__ = "0.1.0"
