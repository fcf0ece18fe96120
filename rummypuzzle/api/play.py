"""
Play endpoints.

Validates boards and scores submissions. The server keeps no session
state: the client sends its board, hand and claimed counts with each
request and gets the updated claimed counts back.
"""

import logging
from datetime import date
from typing import Annotated, Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from rummypuzzle.analysis.melds import check_card_conservation, validate_board
from rummypuzzle.analysis.scoring import max_score, score_submission
from rummypuzzle.api.dependencies import get_store, get_today
from rummypuzzle.config import settings
from rummypuzzle.models.failure import (
    ApiResponse,
    FailureKind,
    KnownError,
    PuzzleNotFoundError,
    RefusalError,
    create_success,
    create_unknown_failure,
)
from rummypuzzle.models.scoring import RejectionReason
from rummypuzzle.parsers.cards import parse_cards, validate_tokens
from rummypuzzle.services.puzzle_calendar import lookup_puzzle
from rummypuzzle.services.puzzle_store import PuzzleStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["play"])


class ValidateRequest(BaseModel):
    """A board to check."""

    board: list[list[str]] = Field(default_factory=list)


class ValidateResponse(BaseModel):
    """Validation result for a board."""

    valid: bool
    invalid_melds: list[int] = Field(default_factory=list)


class SubmitRequest(BaseModel):
    """A board submitted for scoring."""

    date: str
    board: list[list[str]] = Field(default_factory=list)
    hand: list[str] | None = None
    claimed_counts: list[int] = Field(default_factory=list)


class SubmitResponse(BaseModel):
    """Scoring result for a submission."""

    accepted: bool
    points: int
    is_optimal: bool
    total_cards: int
    claimed_counts: list[int]
    completed: bool
    invalid_melds: list[int] = Field(default_factory=list)
    rejection: RejectionReason | None = None
    feedback: str
    max_score: int


@router.post("/validate", response_model=ApiResponse[ValidateResponse])
async def validate(request: ValidateRequest) -> ApiResponse[Any]:
    """
    Check every meld on a board.

    Returns the indices of invalid melds. Malformed card tokens are a
    known failure.
    """
    try:
        validate_tokens(request.board)
        invalid = validate_board(request.board)
        return create_success(
            ValidateResponse(valid=not invalid, invalid_melds=sorted(invalid))
        )
    except KnownError as e:
        return e.to_response()
    except Exception as e:
        logger.exception("Board validation failed")
        return create_unknown_failure(e)


@router.post("/submit", response_model=ApiResponse[SubmitResponse])
async def submit(
    request: SubmitRequest,
    store: Annotated[PuzzleStore, Depends(get_store)],
    today: Annotated[date, Depends(get_today)],
) -> ApiResponse[Any]:
    """
    Score a board against the puzzle for a date.

    Every card on the board (and in the hand, when sent) must come from
    the puzzle's dealt hand, and every claimed count must be achievable;
    anything else is refused.
    """
    try:
        validate_tokens(request.board)
        if request.hand is not None:
            parse_cards(request.hand)

        lookup = lookup_puzzle(store, request.date, today, settings.preview_years)
        puzzle = store.get_puzzle(request.date) if lookup.puzzle is not None else None
        if puzzle is None:
            raise PuzzleNotFoundError(request.date)

        introduced, missing = check_card_conservation(
            puzzle.initial_cards, request.board, request.hand
        )
        if introduced or missing:
            raise RefusalError(
                kind=FailureKind.CARD_CONSERVATION,
                message="The cards in play do not match the cards dealt",
                detail=f"introduced={introduced} missing={missing}",
                suggestion="Reset the puzzle to restore your hand.",
            )

        foreign_counts = sorted(set(request.claimed_counts) - puzzle.achievable_counts)
        if foreign_counts:
            raise RefusalError(
                kind=FailureKind.INVALID_CLAIM,
                message="Claimed counts do not belong to this puzzle",
                detail=f"counts={foreign_counts}",
                suggestion="Reset the puzzle to clear your progress.",
            )

        outcome = score_submission(
            request.board,
            puzzle,
            request.claimed_counts,
            hand=request.hand,
            require_empty_hand=settings.require_empty_hand,
        )

        return create_success(
            SubmitResponse(
                accepted=outcome.accepted,
                points=outcome.points,
                is_optimal=outcome.is_optimal,
                total_cards=outcome.total_cards,
                claimed_counts=sorted(outcome.claimed_counts),
                completed=outcome.completed,
                invalid_melds=sorted(outcome.invalid_melds),
                rejection=outcome.rejection,
                feedback=outcome.feedback,
                max_score=max_score(puzzle),
            )
        )
    except (KnownError, RefusalError) as e:
        return e.to_response()
    except Exception as e:
        logger.exception("Submission scoring failed for %s", request.date)
        return create_unknown_failure(e)
