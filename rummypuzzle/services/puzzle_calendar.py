"""
Puzzle calendar.

Puzzles are keyed by calendar date in a single named time zone, so "today"
is the same for every player regardless of where they are. Puzzles dated
after today stay locked.
"""

import re
from collections.abc import Collection
from dataclasses import dataclass
from datetime import UTC, date, datetime
from enum import Enum
from zoneinfo import ZoneInfo

from rummypuzzle.models.failure import FailureKind, KnownError
from rummypuzzle.models.puzzle import PuzzleRecord
from rummypuzzle.services.puzzle_store import PuzzleStore

DATE_KEY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

FUTURE_PUZZLE_ERROR = "No Puzzle Available Yet"
MISSING_PUZZLE_ERROR = "No Puzzle for this date"


class Direction(str, Enum):
    """Step through the archive: prev is older, next is newer."""

    PREV = "prev"
    NEXT = "next"


class InvalidDateError(KnownError):
    """Raised when a date key is not YYYY-MM-DD."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=f"'{value}' is not a valid date",
            detail="expected YYYY-MM-DD",
            suggestion="Use a date like 2025-01-31.",
        )


@dataclass(frozen=True)
class PuzzleLookup:
    """Puzzle for a date, or the reason there is none."""

    puzzle: PuzzleRecord | None
    error: str | None = None


@dataclass(frozen=True)
class DateNavigation:
    """Where a step through the archive lands."""

    has_puzzle: bool
    next_date: str | None = None


def parse_date_key(value: str) -> date:
    """
    Parse a YYYY-MM-DD date key.

    Raises:
        InvalidDateError: If the value is not a real calendar date
    """
    if not DATE_KEY_PATTERN.match(value):
        raise InvalidDateError(value)
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise InvalidDateError(value) from e


def today_in_zone(tz_name: str, now: datetime | None = None) -> date:
    """
    Calendar date in the given zone.

    Args:
        tz_name: IANA zone name (e.g., "America/New_York")
        now: Moment to convert, defaults to the current time
    """
    if now is None:
        now = datetime.now(UTC)
    return now.astimezone(ZoneInfo(tz_name)).date()


def is_future(target: date, today: date, preview_years: Collection[int] = ()) -> bool:
    """Check whether a puzzle date is still locked."""
    return target > today and target.year not in preview_years


def lookup_puzzle(
    store: PuzzleStore,
    date_key: str,
    today: date,
    preview_years: Collection[int] = (),
) -> PuzzleLookup:
    """
    Find the puzzle for a date.

    Raises:
        InvalidDateError: If date_key is malformed
    """
    target = parse_date_key(date_key)

    if is_future(target, today, preview_years):
        return PuzzleLookup(puzzle=None, error=FUTURE_PUZZLE_ERROR)

    record = store.get_record(date_key)
    if record is None:
        return PuzzleLookup(puzzle=None, error=MISSING_PUZZLE_ERROR)

    return PuzzleLookup(puzzle=record)


def navigate(
    dates: list[str],
    current: str,
    direction: Direction,
    today: date,
    preview_years: Collection[int] = (),
) -> DateNavigation:
    """
    Step to the neighbouring puzzle date.

    Args:
        dates: Available dates, newest first
        current: Date being viewed
        direction: PREV for the older neighbour, NEXT for the newer one
        today: Today's date in the puzzle zone
        preview_years: Years whose future puzzles are unlocked

    Returns:
        DateNavigation; has_puzzle is False when the step would leave the
        archive or land on a locked date
    """
    if current not in dates:
        return DateNavigation(has_puzzle=False)

    index = dates.index(current)
    new_index = index + 1 if direction == Direction.PREV else index - 1

    if not 0 <= new_index < len(dates):
        return DateNavigation(has_puzzle=False)

    target = dates[new_index]
    if is_future(parse_date_key(target), today, preview_years):
        return DateNavigation(has_puzzle=False)

    return DateNavigation(has_puzzle=True, next_date=target)
