"""
Submission scoring.

A valid board scores once per distinct card count. Counts the puzzle author
did not flag as achievable never score; counts matching a recorded optimal
solution score the optimal bonus.
"""

import logging
from collections.abc import Collection, Sequence

from rummypuzzle.analysis.melds import count_cards, validate_board
from rummypuzzle.config import MAX_SCORE_BONUS, OPTIMAL_POINTS, VALID_POINTS
from rummypuzzle.models.puzzle import Puzzle
from rummypuzzle.models.scoring import FEEDBACK, RejectionReason, ScoreOutcome

logger = logging.getLogger(__name__)


def max_score(puzzle: Puzzle) -> int:
    """Best score reachable on a puzzle."""
    return len(puzzle.achievable_counts) * VALID_POINTS + MAX_SCORE_BONUS


def is_optimal_count(puzzle: Puzzle, total_cards: int) -> bool:
    """Check whether a card count matches any recorded optimal solution."""
    return total_cards in puzzle.optimal_counts


def score_submission(
    board: Sequence[Sequence[str]],
    puzzle: Puzzle,
    claimed_counts: Collection[int],
    hand: Sequence[str] | None = None,
    require_empty_hand: bool = False,
) -> ScoreOutcome:
    """
    Score a submitted board.

    The caller owns claimed_counts; it is never modified; the outcome
    carries the updated set instead.

    Args:
        board: Melds on the board
        puzzle: Puzzle being played
        claimed_counts: Card counts already scored this session
        hand: Cards left in hand (only needed with require_empty_hand)
        require_empty_hand: Reject boards that leave cards in hand

    Returns:
        ScoreOutcome describing points, optimality and completion
    """
    claimed = frozenset(claimed_counts)
    total_cards = count_cards(board)

    invalid = validate_board(board)
    if invalid:
        return _reject(RejectionReason.INVALID_MELDS, total_cards, claimed, invalid)

    if require_empty_hand and hand:
        return _reject(RejectionReason.HAND_NOT_EMPTY, total_cards, claimed)

    if total_cards not in puzzle.achievable_counts:
        return _reject(RejectionReason.NOT_ACHIEVABLE, total_cards, claimed)

    if total_cards in claimed:
        return _reject(RejectionReason.ALREADY_CLAIMED, total_cards, claimed)

    optimal = is_optimal_count(puzzle, total_cards)
    points = OPTIMAL_POINTS if optimal else VALID_POINTS
    claimed = claimed | {total_cards}
    completed = puzzle.achievable_counts <= claimed

    logger.debug(
        "Scored %d cards on %s: +%d (optimal=%s, completed=%s)",
        total_cards,
        puzzle.date,
        points,
        optimal,
        completed,
    )

    if optimal:
        feedback = f"Optimal solution! +{points} points"
    else:
        feedback = f"Valid solution! +{points} points"

    return ScoreOutcome(
        accepted=True,
        points=points,
        is_optimal=optimal,
        total_cards=total_cards,
        claimed_counts=claimed,
        completed=completed,
        feedback=feedback,
    )


def _reject(
    reason: RejectionReason,
    total_cards: int,
    claimed: frozenset[int],
    invalid: frozenset[int] = frozenset(),
) -> ScoreOutcome:
    logger.debug("Rejected submission of %d cards: %s", total_cards, reason.value)
    return ScoreOutcome(
        accepted=False,
        points=0,
        is_optimal=False,
        total_cards=total_cards,
        claimed_counts=claimed,
        invalid_melds=invalid,
        rejection=reason,
        feedback=FEEDBACK[reason],
    )
