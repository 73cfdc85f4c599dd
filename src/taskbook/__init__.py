"""taskbook: a local task manager on top of an embedded SQLite store."""

__version__ = "0.1.0"
