"""Services for loading puzzles and running play sessions."""

from rummypuzzle.services.play_session import (
    BoardMoveError,
    add_card,
    create_meld,
    elapsed,
    remove_card,
    reset,
    sort_meld,
    start_session,
    submit,
)
from rummypuzzle.services.puzzle_calendar import (
    FUTURE_PUZZLE_ERROR,
    MISSING_PUZZLE_ERROR,
    DateNavigation,
    Direction,
    InvalidDateError,
    PuzzleLookup,
    is_future,
    lookup_puzzle,
    navigate,
    parse_date_key,
    today_in_zone,
)
from rummypuzzle.services.puzzle_store import (
    PuzzleStore,
    get_puzzle_store,
    load_puzzle_store,
    load_puzzles,
)
from rummypuzzle.services.share import format_elapsed, format_puzzle_date, share_text

__all__ = [
    "BoardMoveError",
    "DateNavigation",
    "Direction",
    "FUTURE_PUZZLE_ERROR",
    "InvalidDateError",
    "MISSING_PUZZLE_ERROR",
    "PuzzleLookup",
    "PuzzleStore",
    "add_card",
    "create_meld",
    "elapsed",
    "format_elapsed",
    "format_puzzle_date",
    "get_puzzle_store",
    "is_future",
    "load_puzzle_store",
    "load_puzzles",
    "lookup_puzzle",
    "navigate",
    "parse_date_key",
    "remove_card",
    "reset",
    "share_text",
    "sort_meld",
    "start_session",
    "submit",
    "today_in_zone",
]
