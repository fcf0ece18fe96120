"""
Puzzle lookup endpoints.

Serves the puzzle for a date, the archive of available dates, and
stepping between neighbouring dates.
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from rummypuzzle.api.dependencies import get_store, get_today
from rummypuzzle.config import settings
from rummypuzzle.models.puzzle import PuzzleRecord
from rummypuzzle.services.puzzle_calendar import (
    Direction,
    InvalidDateError,
    lookup_puzzle,
    navigate,
    parse_date_key,
)
from rummypuzzle.services.puzzle_store import PuzzleStore

router = APIRouter(prefix="/api", tags=["puzzles"])


class PuzzleResponse(BaseModel):
    """A puzzle, or the reason there is none for the date."""

    puzzle: PuzzleRecord | None = None
    error: str | None = None


class DatesResponse(BaseModel):
    """Available puzzle dates, newest first."""

    dates: list[str]
    today: str


class NavigationResponse(BaseModel):
    """Result of stepping to a neighbouring date."""

    has_puzzle: bool
    next_date: str | None = None


@router.get("/today", response_model=PuzzleResponse)
async def get_puzzle(
    store: Annotated[PuzzleStore, Depends(get_store)],
    today: Annotated[date, Depends(get_today)],
    date_key: Annotated[str | None, Query(alias="date")] = None,
) -> PuzzleResponse:
    """
    Get the puzzle for a date (default: today in the puzzle time zone).

    Locked or missing puzzles come back with puzzle=null and an error
    message rather than a 404, so the page can show it inline.
    """
    if date_key is None:
        date_key = today.isoformat()

    try:
        lookup = lookup_puzzle(store, date_key, today, settings.preview_years)
    except InvalidDateError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e

    return PuzzleResponse(puzzle=lookup.puzzle, error=lookup.error)


@router.get("/dates", response_model=DatesResponse)
async def get_dates(
    store: Annotated[PuzzleStore, Depends(get_store)],
    today: Annotated[date, Depends(get_today)],
) -> DatesResponse:
    """List every puzzle date, newest first, with today's date."""
    return DatesResponse(dates=store.dates(), today=today.isoformat())


@router.get("/navigate", response_model=NavigationResponse)
async def navigate_dates(
    store: Annotated[PuzzleStore, Depends(get_store)],
    today: Annotated[date, Depends(get_today)],
    date_key: Annotated[str, Query(alias="date")],
    direction: Direction,
) -> NavigationResponse:
    """
    Step from a date to its older (prev) or newer (next) neighbour.

    Steps off either end of the archive, or onto a locked date, report
    has_puzzle=false.
    """
    try:
        parse_date_key(date_key)
    except InvalidDateError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e

    result = navigate(store.dates(), date_key, direction, today, settings.preview_years)
    return NavigationResponse(has_puzzle=result.has_puzzle, next_date=result.next_date)
