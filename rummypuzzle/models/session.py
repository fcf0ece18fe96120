from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class PuzzleSession:
    """
    Everything a player has done on one puzzle.

    Sessions are values: every move returns a new session and leaves the
    old one untouched. Claimed counts and score survive a board reset.

    Attributes:
        puzzle_date: Date key of the puzzle being played
        hand: Cards not on the board
        board: Melds laid out so far
        claimed_counts: Card counts already scored
        score: Points earned
        fail_count: Rejected submissions
        invalid_melds: Meld indices flagged by the last submission
        feedback: Last message for the player
        started_at: When play began
        solved_at: When the last achievable count was claimed
    """

    puzzle_date: str
    hand: tuple[str, ...] = field(default_factory=tuple)
    board: tuple[tuple[str, ...], ...] = field(default_factory=tuple)
    claimed_counts: frozenset[int] = field(default_factory=frozenset)
    score: int = 0
    fail_count: int = 0
    invalid_melds: frozenset[int] = field(default_factory=frozenset)
    feedback: str | None = None
    started_at: datetime | None = None
    solved_at: datetime | None = None

    @property
    def cards_used(self) -> int:
        return sum(len(meld) for meld in self.board)

    @property
    def is_solved(self) -> bool:
        return self.solved_at is not None
