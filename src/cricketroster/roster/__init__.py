"""Roster storage and read-side helpers (search, export)."""

from .export import TABLE_HEADERS, export_roster_to_csv, roster_rows
from .manager import DuplicatePlayerError, RosterManager
from .search import filter_players

__all__ = [
    "DuplicatePlayerError",
    "RosterManager",
    "TABLE_HEADERS",
    "export_roster_to_csv",
    "filter_players",
    "roster_rows",
]
