"""Shared FastAPI dependencies."""

from datetime import date

from rummypuzzle.config import settings
from rummypuzzle.services.puzzle_calendar import today_in_zone
from rummypuzzle.services.puzzle_store import PuzzleStore, get_puzzle_store


def get_store() -> PuzzleStore:
    """Puzzle store dependency (overridden in tests)."""
    return get_puzzle_store()


def get_today() -> date:
    """Today's date in the puzzle time zone."""
    return today_in_zone(settings.timezone)
