"""
Play session flow.

Board moves and submissions as pure functions over PuzzleSession values.
Cards only ever move between the hand and the board, so the cards in play
always match the cards dealt.
"""

import logging
from collections.abc import Sequence
from dataclasses import replace
from datetime import UTC, datetime, timedelta

from rummypuzzle.analysis.scoring import score_submission
from rummypuzzle.config import MIN_MELD_SIZE
from rummypuzzle.models.card import card_rank, card_suit, is_wildcard
from rummypuzzle.models.failure import FailureKind, KnownError
from rummypuzzle.models.puzzle import Puzzle
from rummypuzzle.models.scoring import ScoreOutcome
from rummypuzzle.models.session import PuzzleSession

logger = logging.getLogger(__name__)


class BoardMoveError(KnownError):
    """Raised when a board move breaks the rules of play."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.INVALID_MOVE,
            message=message,
            detail=detail,
        )


def start_session(puzzle: Puzzle, now: datetime | None = None) -> PuzzleSession:
    """Deal the puzzle's hand onto an empty board."""
    return PuzzleSession(
        puzzle_date=puzzle.date,
        hand=puzzle.initial_cards,
        started_at=now or datetime.now(UTC),
    )


def _meld_sort_key(card: str) -> tuple[int, str, int]:
    if is_wildcard(card):
        return (1, "", 0)
    return (0, card_suit(card), card_rank(card))


def sort_meld(cards: Sequence[str]) -> tuple[str, ...]:
    """Order a meld by suit code then rank, wildcards last."""
    return tuple(sorted(cards, key=_meld_sort_key))


def create_meld(session: PuzzleSession, selection: Sequence[str]) -> PuzzleSession:
    """
    Lay the selected cards down as a new meld.

    Raises:
        BoardMoveError: If fewer than 3 cards are selected or a selected
            card is not in hand
    """
    if len(selection) < MIN_MELD_SIZE:
        raise BoardMoveError("A meld must contain at least 3 cards")

    hand = _take_from_hand(session.hand, selection)
    return replace(
        session,
        hand=hand,
        board=(*session.board, tuple(selection)),
        feedback=None,
    )


def remove_card(session: PuzzleSession, meld_index: int, card_index: int) -> PuzzleSession:
    """
    Return one card from a meld to the hand.

    A meld left without cards is removed from the board.

    Raises:
        BoardMoveError: If either index is out of range
    """
    if not 0 <= meld_index < len(session.board):
        raise BoardMoveError("No such meld", detail=f"meld_index={meld_index}")
    meld = session.board[meld_index]
    if not 0 <= card_index < len(meld):
        raise BoardMoveError("No such card in meld", detail=f"card_index={card_index}")

    card = meld[card_index]
    remaining = meld[:card_index] + meld[card_index + 1 :]

    board = list(session.board)
    if remaining:
        board[meld_index] = remaining
    else:
        del board[meld_index]

    return replace(session, hand=(*session.hand, card), board=tuple(board))


def add_card(session: PuzzleSession, meld_index: int, selection: Sequence[str]) -> PuzzleSession:
    """
    Move a single selected card from the hand into an existing meld.

    Raises:
        BoardMoveError: If the selection is not exactly one card, the meld
            does not exist, or the card is not in hand
    """
    if len(selection) != 1:
        raise BoardMoveError("Select exactly one card to add")
    if not 0 <= meld_index < len(session.board):
        raise BoardMoveError("No such meld", detail=f"meld_index={meld_index}")

    hand = _take_from_hand(session.hand, selection)
    board = list(session.board)
    board[meld_index] = sort_meld([*board[meld_index], selection[0]])

    return replace(session, hand=hand, board=tuple(board), feedback=None)


def submit(
    session: PuzzleSession,
    puzzle: Puzzle,
    now: datetime | None = None,
    require_empty_hand: bool = False,
) -> tuple[PuzzleSession, ScoreOutcome]:
    """
    Score the current board and fold the result into the session.

    Returns:
        (updated session, scoring outcome)
    """
    outcome = score_submission(
        session.board,
        puzzle,
        session.claimed_counts,
        hand=session.hand,
        require_empty_hand=require_empty_hand,
    )

    if not outcome.accepted:
        return (
            replace(
                session,
                fail_count=session.fail_count + 1,
                invalid_melds=outcome.invalid_melds,
                feedback=outcome.feedback,
            ),
            outcome,
        )

    solved_at = session.solved_at
    if outcome.completed and solved_at is None:
        solved_at = now or datetime.now(UTC)
        logger.info(
            "Puzzle %s completed with score %d", puzzle.date, session.score + outcome.points
        )

    return (
        replace(
            session,
            score=session.score + outcome.points,
            claimed_counts=outcome.claimed_counts,
            invalid_melds=frozenset(),
            feedback=outcome.feedback,
            solved_at=solved_at,
        ),
        outcome,
    )


def reset(session: PuzzleSession, puzzle: Puzzle) -> PuzzleSession:
    """Clear the board and restore the dealt hand, keeping the score."""
    return replace(
        session,
        hand=puzzle.initial_cards,
        board=(),
        invalid_melds=frozenset(),
        feedback=None,
    )


def elapsed(session: PuzzleSession, now: datetime | None = None) -> timedelta:
    """Time spent on the puzzle, frozen once it is solved."""
    if session.started_at is None:
        return timedelta(0)
    end = session.solved_at or now or datetime.now(UTC)
    return end - session.started_at


def _take_from_hand(hand: Sequence[str], cards: Sequence[str]) -> tuple[str, ...]:
    remaining = list(hand)
    for card in cards:
        try:
            remaining.remove(card)
        except ValueError:
            raise BoardMoveError("Card is not in your hand", detail=f"card={card}") from None
    return tuple(remaining)
