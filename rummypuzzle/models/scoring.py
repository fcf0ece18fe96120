from dataclasses import dataclass, field
from enum import Enum


class RejectionReason(str, Enum):
    """Why a submission earned no points."""

    INVALID_MELDS = "invalid_melds"
    HAND_NOT_EMPTY = "hand_not_empty"
    NOT_ACHIEVABLE = "not_achievable"
    ALREADY_CLAIMED = "already_claimed"


FEEDBACK: dict[RejectionReason, str] = {
    RejectionReason.INVALID_MELDS: "Some melds are invalid",
    RejectionReason.HAND_NOT_EMPTY: "Use every card in your hand before submitting",
    RejectionReason.NOT_ACHIEVABLE: "This card count is not possible",
    RejectionReason.ALREADY_CLAIMED: "This card count has already been used",
}


@dataclass(frozen=True)
class ScoreOutcome:
    """
    Result of scoring one submitted board.

    Attributes:
        accepted: True if points were awarded
        points: Points awarded (0 when rejected)
        is_optimal: Count matches a recorded optimal solution
        total_cards: Cards on the submitted board
        claimed_counts: Claimed counts after this submission
        completed: Every achievable count has been claimed
        invalid_melds: Indices of melds that failed validation
        rejection: Reason for rejecting, None when accepted
        feedback: Message shown to the player
    """

    accepted: bool
    points: int
    is_optimal: bool
    total_cards: int
    claimed_counts: frozenset[int] = field(default_factory=frozenset)
    completed: bool = False
    invalid_melds: frozenset[int] = field(default_factory=frozenset)
    rejection: RejectionReason | None = None
    feedback: str = ""
